"""Workload subpackage.

Port-forwarding to pods and editing ConfigMap/Secret data entries.
"""

from svcat_auto.workloads.config_data import delete_config_data, load_config_data, parse_resource_ref
from svcat_auto.workloads.documents import find_kind_name_in_document
from svcat_auto.workloads.port_forward import (
    find_free_port,
    find_port_forwardable_pods,
    port_forward,
    port_forward_to_pod,
    prompt_for_port,
    validate_port,
)

__all__ = [
    # config data
    "delete_config_data",
    "load_config_data",
    "parse_resource_ref",
    # documents
    "find_kind_name_in_document",
    # port forward
    "find_free_port",
    "find_port_forwardable_pods",
    "port_forward",
    "port_forward_to_pod",
    "prompt_for_port",
    "validate_port",
]
