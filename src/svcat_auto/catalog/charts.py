"""Helm chart selection and values file updates.

Binding key names are recorded in the chart's ``values.yaml`` under
``serviceCatalogEnv`` so templates can expose them as environment variables.
"""

import os
from pathlib import Path
from typing import Any

import questionary
import yaml
from icecream import ic

from svcat_auto import console
from svcat_auto.exceptions import ValuesFileError
from svcat_auto.styles import POINTER, PROMPT_STYLE, QMARK

SERVICE_CATALOG_ENV_KEY = "serviceCatalogEnv"
_CHART_FILE = "Chart.yaml"
_VALUES_FILE = "values.yaml"
_SUBCHARTS_DIR = "charts"


def find_charts(root: Path) -> list[Path]:
    """Find chart directories below a root directory.

    Hidden directories and the ``charts/`` subchart directories of a chart
    are not searched.

    Args:
        root: Directory to search recursively.

    Returns:
        Sorted chart directories (those containing ``Chart.yaml``).

    """
    charts = []
    for dirpath, dirnames, filenames in os.walk(root):
        if _CHART_FILE in filenames:
            charts.append(Path(dirpath))
            dirnames[:] = [name for name in dirnames if name != _SUBCHARTS_DIR]
        dirnames[:] = [name for name in dirnames if not name.startswith(".")]

    charts.sort()
    ic(charts)
    return charts


def pick_chart(root: Path) -> Path | None:
    """Choose the chart to update.

    A single chart is used without asking.

    Args:
        root: Directory to search for charts.

    Returns:
        The chart directory, or None if none was found or the prompt was cancelled.

    """
    charts = find_charts(root)
    if not charts:
        console.error(f"Could not find any charts in {console.highlight(str(root))}")
        return None
    if len(charts) == 1:
        return charts[0]

    choice: str | None = questionary.select(
        "Select the chart to add the External Service to",
        choices=[str(chart) for chart in charts],
        style=PROMPT_STYLE,
        pointer=POINTER,
        qmark=QMARK,
    ).ask()
    return Path(choice) if choice is not None else None


def add_service_catalog_env(values: dict[str, Any], binding_name: str, secret_keys: list[str]) -> dict[str, Any]:
    """Record a binding's secret keys in a values document.

    Args:
        values: Parsed values document, modified in place.
        binding_name: Name of the binding.
        secret_keys: Key names in the binding secret.

    Returns:
        The same values document.

    Raises:
        ValuesFileError: If ``serviceCatalogEnv`` exists but is not a list.

    """
    entry = {"name": binding_name, "vars": list(secret_keys)}
    existing = values.get(SERVICE_CATALOG_ENV_KEY)

    if not existing:
        values[SERVICE_CATALOG_ENV_KEY] = [entry]
    elif isinstance(existing, list):
        existing.append(entry)
    else:
        raise ValuesFileError(f"'{SERVICE_CATALOG_ENV_KEY}' must be a list, got {type(existing).__name__}")

    return values


def load_values(values_file: Path) -> dict[str, Any]:
    """Read a chart values file.

    An empty file reads as an empty mapping.

    Raises:
        ValuesFileError: If the file is missing, malformed or not a mapping.

    """
    try:
        with values_file.open() as stream:
            values = yaml.safe_load(stream)
    except FileNotFoundError as err:
        raise ValuesFileError(f"Values file '{values_file}' does not exist") from err
    except yaml.YAMLError as err:
        raise ValuesFileError(f"Values file '{values_file}' contains malformed YAML: {err}") from err

    if values is None:
        return {}
    if not isinstance(values, dict):
        raise ValuesFileError(f"Values file '{values_file}' does not contain a YAML mapping")
    return values


def write_secret_keys(chart_path: Path, binding_name: str, secret_keys: list[str]) -> Path:
    """Append a binding's secret key names to the chart's values file.

    The file is removed and written again from the updated document.

    Args:
        chart_path: Chart directory.
        binding_name: Name of the binding.
        secret_keys: Key names (never values) of the binding secret.

    Returns:
        Path of the rewritten values file.

    Raises:
        ValuesFileError: If the values file cannot be read or updated.

    """
    values_file = chart_path / _VALUES_FILE
    values = add_service_catalog_env(load_values(values_file), binding_name, secret_keys)

    console.step(f"Writing {len(secret_keys)} key name(s) to {console.highlight(str(values_file))}")
    values_file.unlink()
    with values_file.open("w") as stream:
        yaml.safe_dump(values, stream, default_flow_style=False, sort_keys=False)

    return values_file
