"""Service binding workflow.

Binds the application to a service catalog instance, records the names of
the generated secret's keys in a chart's values file and leaves usage notes
on the clipboard.

Every step reports its own failure and returns None; the workflow stops at
the first None. A binding created on the cluster is not rolled back when a
later step fails.
"""

import json
from collections.abc import Callable
from pathlib import Path

import pyperclip
from icecream import ic

from svcat_auto import console
from svcat_auto.catalog.cache import ServiceInstanceCache
from svcat_auto.catalog.charts import pick_chart, write_secret_keys
from svcat_auto.catalog.prompts import select_service_instance
from svcat_auto.core.tools import Kubectl, Svcat
from svcat_auto.exceptions import CommandExecutionError, SecretDecodeError, ValuesFileError
from svcat_auto.models import ServiceBinding

_USAGE_HEADER = (
    "// To use service {name}, we added a number of environment variables\n"
    "// to your application, as listed below:\n"
)


def decode_secret_keys(document: str) -> list[str]:
    """Extract the key names of a secret's ``data`` map.

    Args:
        document: ``kubectl get secret -o json`` output.

    Returns:
        Key names in document order.

    Raises:
        SecretDecodeError: If the document is not JSON or ``data`` is not a
            mapping of strings to strings.

    """
    try:
        secret = json.loads(document)
    except json.JSONDecodeError as err:
        raise SecretDecodeError(f"Secret is not valid JSON: {err}") from err

    if not isinstance(secret, dict) or "data" not in secret:
        raise SecretDecodeError("Secret has no 'data' field")

    data = secret["data"]
    if not isinstance(data, dict) or not all(isinstance(value, str) for value in data.values()):
        raise SecretDecodeError("Secret 'data' field is not a map of strings")

    return list(data)


def format_usage(binding_name: str, secret_keys: list[str]) -> str:
    """Build the environment variable usage notes for a binding.

    Args:
        binding_name: Name of the binding.
        secret_keys: Key names of the binding secret.

    Returns:
        Comment lines naming one environment variable per key.

    """
    env_vars = [f"// {binding_name}_{key}".upper() for key in secret_keys]
    return _USAGE_HEADER.format(name=binding_name) + "\n".join(env_vars)


class BindingWorkflow:
    """Interactive creation of a service binding.

    Attributes:
        cache: Service instances of the session.
        svcat: svcat wrapper used to create the binding.
        kubectl: kubectl wrapper used to read the binding secret.
        chart_root: Directory searched for charts when no chart is given.
        chart: Chart directory to update, skipping the chart prompt.

    """

    def __init__(
        self,
        *,
        cache: ServiceInstanceCache,
        svcat: Svcat,
        kubectl: Kubectl,
        chart_root: Path,
        chart: Path | None = None,
        copy_to_clipboard: Callable[[str], None] = pyperclip.copy,
    ) -> None:
        self.cache = cache
        self.svcat = svcat
        self.kubectl = kubectl
        self.chart_root = chart_root
        self.chart = chart
        self._copy_to_clipboard = copy_to_clipboard

    def run(self) -> ServiceBinding | None:
        """Run the binding workflow from instance selection to usage notes.

        Returns:
            The created binding, or None if a step failed or was cancelled.

        """
        instances = self.cache.get_service_instances()
        if instances is None:
            return None
        if not instances:
            console.warning("No External Services found on the cluster")
            return None

        instance_name = select_service_instance(self.cache.names)
        if instance_name is None:
            return None

        binding = self.create_service_binding(instance_name)
        if binding is None:
            return None

        secret_keys = self.get_secret_keys(binding)
        if secret_keys is None:
            return None

        chart_path = self.chart or pick_chart(self.chart_root)
        if chart_path is None:
            return None

        try:
            write_secret_keys(chart_path, binding.name, secret_keys)
        except (ValuesFileError, OSError) as e:
            console.error(f"Could not update values for chart {chart_path}: {e}")
            return None

        self.write_usage_to_clipboard(binding.name, secret_keys)

        console.success(f'Bound the application to External Service "{instance_name}"')
        return binding

    def create_service_binding(self, instance_name: str) -> ServiceBinding | None:
        """Bind to a service instance.

        Args:
            instance_name: The instance to bind; also the binding name.

        Returns:
            The binding, or None if svcat failed.

        """
        instance = self.cache.get(instance_name)
        namespace = instance.namespace if instance is not None else None

        try:
            with console.spinner(f"Binding to {instance_name}..."):
                results = self.svcat.bind(instance_name, namespace)
        except CommandExecutionError as e:
            ic(e)
            console.error(f'Error binding to External Service "{instance_name}"')
            return None

        if not results.succeeded:
            ic(results.stderr)
            console.error(f'Could not bind to External Service "{instance_name}"')
            return None

        console.step(f"Created binding {console.highlight(instance_name)}")
        return ServiceBinding(name=instance_name, namespace=namespace)

    def get_secret_keys(self, binding: ServiceBinding) -> list[str] | None:
        """Read the key names of the binding's secret.

        Args:
            binding: The binding whose secret to read.

        Returns:
            The key names, or None if the secret could not be read or decoded.

        """
        try:
            results = self.kubectl.get_json("secret", binding.name, binding.namespace)
        except CommandExecutionError as e:
            ic(e)
            console.error(f"Could not find the External Service secret {binding.name} on the cluster")
            return None

        if not results.succeeded:
            ic(results.stderr)
            console.error(f"Could not get External Service {binding.name} on the cluster")
            return None

        try:
            secret_keys = decode_secret_keys(results.stdout)
        except SecretDecodeError as e:
            console.error(f"Could not read External Service secret {binding.name}: {e}")
            return None

        ic(secret_keys)
        return secret_keys

    def write_usage_to_clipboard(self, binding_name: str, secret_keys: list[str]) -> None:
        """Copy environment variable usage notes to the clipboard.

        Falls back to printing the notes when no clipboard is available.

        Args:
            binding_name: Name of the binding.
            secret_keys: Key names of the binding secret.

        """
        message = format_usage(binding_name, secret_keys)
        try:
            self._copy_to_clipboard(message)
        except pyperclip.PyperclipException as e:
            ic(e)
            console.warning("Clipboard is not available, Service Usage information follows:")
            console.plain(message)
            return

        console.info("Wrote Service Usage information to your clipboard.")
