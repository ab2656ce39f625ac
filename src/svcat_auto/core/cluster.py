"""Kubernetes cluster interaction utilities.

This module provides the Cluster class for kubeconfig context selection,
namespace resolution and pod discovery.
"""

from typing import Any

import click
import questionary
from icecream import ic
from kubernetes import client, config
from kubernetes.client.exceptions import ApiException
from kubernetes.config.config_exception import ConfigException
from urllib3.exceptions import MaxRetryError

from svcat_auto import console
from svcat_auto.exceptions import ClusterConnectionError
from svcat_auto.models import PodLookup
from svcat_auto.styles import POINTER, PROMPT_STYLE, QMARK

_DEFAULT_NAMESPACE = "default"


class Cluster:
    """Kubeconfig context and pod discovery for one session.

    Attributes:
        context: The active Kubernetes context name.
        namespace: The context's namespace, or ``default``.

    """

    def __init__(self, *, select_context: bool) -> None:
        """Initialize Cluster with context selection.

        Args:
            select_context: If True, prompt user to select a context.
                           If False, use the current context.

        Raises:
            ClusterConnectionError: If the kubeconfig cannot be loaded.

        """
        context_entry = self._set_context(select_context=select_context)
        self.context: str = str(context_entry["name"])
        self.namespace: str = context_entry.get("context", {}).get("namespace") or _DEFAULT_NAMESPACE
        try:
            config.load_kube_config(context=self.context)
        except ConfigException as e:
            raise ClusterConnectionError(f"Failed to load context {self.context!r}: {e}") from e

    @staticmethod
    def _set_context(*, select_context: bool) -> dict[str, Any]:
        """Pick the kubeconfig context entry to use.

        Args:
            select_context: If True, prompt user to select a context.

        Returns:
            The kubeconfig context entry (``name`` and ``context`` keys).

        Raises:
            ClusterConnectionError: If kubeconfig is invalid or missing.
            click.Abort: If user cancels context selection.

        """
        try:
            contexts, current_context = config.list_kube_config_contexts()
        except ConfigException as e:
            raise ClusterConnectionError(f"Invalid or missing kubeconfig: {e}") from e
        if select_context:
            context_names: list[str] = [context["name"] for context in contexts]
            name: str | None = questionary.select(
                "Select context to work with",
                choices=context_names,
                style=PROMPT_STYLE,
                pointer=POINTER,
                qmark=QMARK,
            ).ask()
            if name is None:
                console.warning("Context selection cancelled.")
                raise click.Abort()
            context = next(c for c in contexts if c["name"] == name)
        else:
            context = current_context
        console.action(f"Working with {console.highlight(str(context['name']))} cluster")
        return context

    def find_all_pods(self) -> PodLookup:
        """List pod names in the context's namespace.

        Returns:
            PodLookup with ``succeeded`` False when the API call failed.

        """
        try:
            with console.spinner(f"Listing pods in {self.namespace}..."):
                pods = client.CoreV1Api().list_namespaced_pod(self.namespace).items
        except (ApiException, MaxRetryError) as e:
            ic(e)
            return PodLookup(succeeded=False, pods=[])

        names = [pod.metadata.name for pod in pods]
        ic(names)
        return PodLookup(succeeded=True, pods=names)

    def __repr__(self) -> str:
        """Return a detailed string representation for debugging."""
        return f"Cluster(context={self.context!r}, namespace={self.namespace!r})"
