"""Service catalog subpackage.

Instance listing and caching, the binding workflow and chart values updates.
"""

from svcat_auto.catalog.binding import BindingWorkflow, decode_secret_keys, format_usage
from svcat_auto.catalog.cache import ServiceInstanceCache
from svcat_auto.catalog.charts import add_service_catalog_env, find_charts, pick_chart, write_secret_keys
from svcat_auto.catalog.parsing import parse_instance_row, parse_instance_table
from svcat_auto.catalog.prompts import select_service_instance

__all__ = [
    # binding
    "BindingWorkflow",
    "decode_secret_keys",
    "format_usage",
    # cache
    "ServiceInstanceCache",
    # charts
    "add_service_catalog_env",
    "find_charts",
    "pick_chart",
    "write_secret_keys",
    # parsing
    "parse_instance_row",
    "parse_instance_table",
    # prompts
    "select_service_instance",
]
