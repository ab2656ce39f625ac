"""Data models for svcat-auto.

Typed records passed between the command wrappers, the service catalog
workflow and the port-forward resolver.
"""

import subprocess
from dataclasses import dataclass
from typing import NamedTuple


class CommandResult(NamedTuple):
    """Outcome of a command line that was launched successfully.

    Attributes:
        exit_code: Process exit status.
        stdout: Captured standard output.
        stderr: Captured standard error.

    """

    exit_code: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        """Whether the command exited with status 0."""
        return self.exit_code == 0


@dataclass(frozen=True, slots=True)
class ServiceInstance:
    """A provisioned external service tracked by the service catalog.

    Fields are None when the listing row was too short to supply them.

    Attributes:
        name: Instance name, unique within a cache.
        namespace: Namespace the instance lives in.
        class_name: Service class (``CLASS`` column).
        plan: Service plan.
        status: Provisioning status.

    """

    name: str | None
    namespace: str | None
    class_name: str | None
    plan: str | None
    status: str | None


@dataclass(frozen=True, slots=True)
class ServiceBinding:
    """A binding created for a service instance.

    The binding shares its name with the instance, and the generated
    credential secret shares it as well.
    """

    name: str
    namespace: str | None = None


class PodLookup(NamedTuple):
    """Result of searching for port-forwardable pods.

    Attributes:
        succeeded: False when the pod listing itself failed.
        pods: Candidate pod names.
        from_open_document: True when the single pod came from a manifest.

    """

    succeeded: bool
    pods: list[str]
    from_open_document: bool = False


@dataclass(slots=True)
class PortForwardSession:
    """A running ``kubectl port-forward`` process.

    The process is attached to the terminal and is not awaited by the code
    that started it.
    """

    pod: str
    local_port: int
    target_port: int
    process: subprocess.Popen
