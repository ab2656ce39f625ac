"""Viewing and deleting single entries of ConfigMap and Secret data."""

import base64
import binascii
import json
from typing import Any

import click
import questionary
from icecream import ic

from svcat_auto import console
from svcat_auto.core.tools import Kubectl
from svcat_auto.exceptions import CommandExecutionError
from svcat_auto.styles import PROMPT_STYLE, QMARK

_RESOURCE_ALIASES = {
    "configmap": "configmaps",
    "configmaps": "configmaps",
    "cm": "configmaps",
    "secret": "secrets",
    "secrets": "secrets",
}


def parse_resource_ref(ref: str) -> tuple[str, str]:
    """Split a ``resource/name`` reference.

    Args:
        ref: Reference such as ``configmaps/app-config`` or ``secret/db``.

    Returns:
        Tuple of (plural resource, name).

    Raises:
        click.BadParameter: If the resource is not a ConfigMap or Secret, or
            the name is missing.

    """
    resource, _, name = ref.partition("/")
    normalized = _RESOURCE_ALIASES.get(resource.lower())
    if normalized is None or not name:
        raise click.BadParameter(f"'{ref}' must look like configmaps/NAME or secrets/NAME")
    return normalized, name


def _fetch_object(kubectl: Kubectl, resource: str, name: str, namespace: str) -> dict[str, Any] | None:
    try:
        results = kubectl.get_json(resource, name, namespace)
    except CommandExecutionError as e:
        ic(e)
        console.error(f"Error loading {resource}/{name}")
        return None

    if not results.succeeded:
        console.error(f"Error loading {resource}/{name}: {results.stderr.strip()}")
        return None

    try:
        return json.loads(results.stdout)
    except json.JSONDecodeError as e:
        console.error(f"Error loading {resource}/{name}: {e}")
        return None


def load_config_data(kubectl: Kubectl, resource: str, name: str, key: str, namespace: str) -> str | None:
    """Read one data entry of a ConfigMap or Secret.

    Secret values are base64 decoded.

    Args:
        kubectl: kubectl wrapper.
        resource: ``configmaps`` or ``secrets``.
        name: Object name.
        key: Data key.
        namespace: Object namespace.

    Returns:
        The entry text, or None if it could not be loaded.

    """
    obj = _fetch_object(kubectl, resource, name, namespace)
    if obj is None:
        return None

    data = obj.get("data") or {}
    if key not in data:
        console.error(f"Key {console.highlight(key)} not found in {resource}/{name}")
        return None

    value = data[key]
    if resource == "secrets":
        try:
            value = base64.b64decode(value).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            console.error(f"Error loading data file: {e}")
            return None

    return value


def delete_config_data(kubectl: Kubectl, resource: str, name: str, key: str, namespace: str) -> bool:
    """Remove one data entry from a ConfigMap or Secret after confirmation.

    The object is fetched, edited and sent back with ``kubectl replace``.

    Args:
        kubectl: kubectl wrapper.
        resource: ``configmaps`` or ``secrets``.
        name: Object name.
        key: Data key to delete.
        namespace: Object namespace.

    Returns:
        True if the entry was deleted.

    """
    confirmed = questionary.confirm(
        f"Are you sure you want to delete {key}? This can not be undone",
        default=False,
        style=PROMPT_STYLE,
        qmark=QMARK,
    ).ask()
    if not confirmed:
        return False

    obj = _fetch_object(kubectl, resource, name, namespace)
    if obj is None:
        return False

    obj["data"] = {k: v for k, v in (obj.get("data") or {}).items() if k != key}

    try:
        results = kubectl.invoke(["replace", "-f", "-", "--namespace", namespace], stdin=json.dumps(obj))
    except CommandExecutionError as e:
        console.error(f"Failed to delete file: {e}")
        return False

    if not results.succeeded:
        console.error(f"Failed to delete file: {results.stderr.strip()}")
        return False

    console.success(f"Data '{key}' deleted from resource.")
    return True
