"""Wrappers for the svcat and kubectl binaries.

Each wrapper is bound to one resolved binary and one kubeconfig context and
only builds argument lists; running them is left to ``svcat_auto.shell``.
"""

import subprocess

from svcat_auto import shell
from svcat_auto.models import CommandResult


class Kubectl:
    """kubectl bound to a kubeconfig context.

    Attributes:
        binary: Path to the kubectl binary.
        context: Kubeconfig context passed with ``--context``.

    """

    def __init__(self, binary: str, context: str) -> None:
        self.binary: str = binary
        self.context: str = context

    def _build_cmd(self, args: list[str]) -> list[str]:
        return [self.binary, f"--context={self.context}", *args]

    def invoke(self, args: list[str], *, stdin: str | None = None) -> CommandResult:
        """Run a kubectl command and capture its output.

        Args:
            args: kubectl arguments, e.g. ``["get", "pods"]``.
            stdin: Optional document passed on standard input.

        Returns:
            The command result.

        Raises:
            CommandExecutionError: If kubectl could not be started.

        """
        return shell.run_command(self._build_cmd(args), stdin=stdin)

    def invoke_in_terminal(self, args: list[str]) -> subprocess.Popen:
        """Start a kubectl command attached to the terminal.

        Args:
            args: kubectl arguments.

        Returns:
            The process handle; the caller decides whether to wait.

        """
        return shell.spawn_attached(self._build_cmd(args))

    def get_json(self, resource: str, name: str, namespace: str | None = None) -> CommandResult:
        """Fetch one object as JSON.

        Args:
            resource: Resource type, e.g. ``secret``.
            name: Object name.
            namespace: Namespace, or None for the context default.

        Returns:
            The command result; stdout holds the JSON document on success.

        """
        args = ["get", resource, name]
        if namespace:
            args.extend(["--namespace", namespace])
        args.extend(["-o", "json"])
        return self.invoke(args)

    def __repr__(self) -> str:
        return f"Kubectl(binary={self.binary!r}, context={self.context!r})"


class Svcat:
    """svcat (Service Catalog CLI) bound to a kubeconfig context.

    Attributes:
        binary: Path to the svcat binary.
        context: Kubeconfig context passed with ``--context``.

    """

    def __init__(self, binary: str, context: str) -> None:
        self.binary: str = binary
        self.context: str = context

    def _build_cmd(self, args: list[str]) -> list[str]:
        return [self.binary, *args, f"--context={self.context}"]

    def get_instances(self) -> CommandResult:
        """List service instances as a text table.

        Raises:
            CommandExecutionError: If svcat could not be started.

        """
        return shell.run_command(self._build_cmd(["get", "instances"]))

    def bind(self, instance_name: str, namespace: str | None = None) -> CommandResult:
        """Bind to a service instance, creating a credentials secret.

        Args:
            instance_name: The service instance to bind.
            namespace: Namespace of the instance, or None for the context default.

        Raises:
            CommandExecutionError: If svcat could not be started.

        """
        args = ["bind", instance_name]
        if namespace:
            args.extend(["--namespace", namespace])
        return shell.run_command(self._build_cmd(args))

    def __repr__(self) -> str:
        return f"Svcat(binary={self.binary!r}, context={self.context!r})"
