"""svcat-auto: Interactive Service Catalog bindings and pod port-forwarding.

This package wraps the svcat and kubectl binaries with an interactive CLI:
binding applications to Service Catalog instances, recording the binding
secret keys in Helm chart values, and port-forwarding to pods.

Example usage:
    from svcat_auto import Session

    # Use the current kubeconfig context
    session = Session(select_context=False)
    session.bind()
"""

__version__ = "0.1.0"

from svcat_auto.cli import cli
from svcat_auto.core.session import Session
from svcat_auto.catalog.cache import ServiceInstanceCache
from svcat_auto.exceptions import (
    BinaryNotFoundError,
    ClusterConnectionError,
    CommandExecutionError,
    PortUnavailableError,
    SecretDecodeError,
    SvcatAutoError,
    ValuesFileError,
)

__all__ = [
    # Version
    "__version__",
    # Main CLI
    "cli",
    # Classes
    "ServiceInstanceCache",
    "Session",
    # Exceptions
    "SvcatAutoError",
    "BinaryNotFoundError",
    "ClusterConnectionError",
    "CommandExecutionError",
    "PortUnavailableError",
    "SecretDecodeError",
    "ValuesFileError",
]
