"""Session facade.

This module provides the Session class, the main entry point for all
commands. A session owns one kubeconfig context, the tool wrappers bound to
it and the service instance cache, for the life of the process.
"""

from functools import cached_property
from pathlib import Path

from svcat_auto import console, shell
from svcat_auto.catalog.binding import BindingWorkflow
from svcat_auto.catalog.cache import ServiceInstanceCache
from svcat_auto.core.cluster import Cluster
from svcat_auto.core.tools import Kubectl, Svcat
from svcat_auto.models import PortForwardSession, ServiceBinding, ServiceInstance
from svcat_auto.workloads.config_data import delete_config_data, load_config_data, parse_resource_ref
from svcat_auto.workloads.port_forward import port_forward


class Session:
    """Commands against one cluster context.

    Binaries are resolved on first use, so a port-forward does not require
    svcat to be installed.

    Attributes:
        cluster: Cluster for the selected context.
        svcat_binary: svcat name or path, resolved through PATH.
        kubectl_binary: kubectl name or path, resolved through PATH.

    """

    def __init__(
        self,
        *,
        select_context: bool,
        svcat_binary: str = "svcat",
        kubectl_binary: str = "kubectl",
    ) -> None:
        """Initialize Session with context selection.

        Args:
            select_context: If True, prompt user to select a Kubernetes context.
            svcat_binary: svcat executable name or path.
            kubectl_binary: kubectl executable name or path.

        Raises:
            ClusterConnectionError: If the kubeconfig cannot be loaded.

        """
        self.cluster: Cluster = Cluster(select_context=select_context)
        self.svcat_binary: str = svcat_binary
        self.kubectl_binary: str = kubectl_binary

    @cached_property
    def svcat(self) -> Svcat:
        """svcat wrapper bound to the session context."""
        return Svcat(shell.resolve_binary(self.svcat_binary), self.cluster.context)

    @cached_property
    def kubectl(self) -> Kubectl:
        """kubectl wrapper bound to the session context."""
        return Kubectl(shell.resolve_binary(self.kubectl_binary), self.cluster.context)

    @cached_property
    def instances(self) -> ServiceInstanceCache:
        """Service instances known to the session."""
        return ServiceInstanceCache(self.svcat)

    def list_instances(self) -> list[ServiceInstance] | None:
        """Print the service instances as a table.

        Returns:
            The instances, or None if listing failed.

        """
        instances = self.instances.get_service_instances()
        if instances is None:
            return None
        if not instances:
            console.warning("No External Services found on the cluster")
            return instances

        console.instances_table(instances)
        return instances

    def bind(self, *, chart: Path | None = None, chart_root: Path | None = None) -> ServiceBinding | None:
        """Run the binding workflow.

        Args:
            chart: Chart directory to update; prompts when None.
            chart_root: Directory searched for charts; the working directory if None.

        Returns:
            The created binding, or None if the workflow stopped early.

        """
        workflow = BindingWorkflow(
            cache=self.instances,
            svcat=self.svcat,
            kubectl=self.kubectl,
            chart_root=chart_root or Path.cwd(),
            chart=chart,
        )
        return workflow.run()

    def port_forward(
        self,
        *,
        pod: str | None = None,
        document: Path | None = None,
        local_port: int | None = None,
    ) -> PortForwardSession | None:
        """Resolve a pod and port and start port-forwarding.

        Returns:
            The running session, or None if resolution failed or was cancelled.

        """
        return port_forward(
            self.cluster,
            self.kubectl,
            pod=pod,
            document=document,
            local_port=local_port,
        )

    def show_data(self, ref: str, key: str) -> str | None:
        """Print one ConfigMap or Secret data entry.

        Args:
            ref: ``resource/name`` reference.
            key: Data key.

        Returns:
            The entry text, or None if it could not be loaded.

        """
        resource, name = parse_resource_ref(ref)
        value = load_config_data(self.kubectl, resource, name, key, self.cluster.namespace)
        if value is not None:
            console.plain(value)
        return value

    def delete_data(self, ref: str, key: str) -> bool:
        """Delete one ConfigMap or Secret data entry.

        Args:
            ref: ``resource/name`` reference.
            key: Data key.

        Returns:
            True if the entry was deleted.

        """
        resource, name = parse_resource_ref(ref)
        return delete_config_data(self.kubectl, resource, name, key, self.cluster.namespace)

    def __repr__(self) -> str:
        """Return a detailed string representation for debugging."""
        return f"Session(cluster={self.cluster!r})"
