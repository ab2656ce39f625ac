"""Custom exceptions for svcat-auto.

This module defines the exception hierarchy used throughout the application.
Workflow steps catch these locally and report them to the operator; only
session setup errors reach the command-line entry point.
"""


class SvcatAutoError(Exception):
    """Base exception for all svcat-auto errors."""

    pass


class ClusterConnectionError(SvcatAutoError):
    """Raised when the kubeconfig cannot be loaded or the cluster is unreachable.

    This can occur when:
    - The kubeconfig is invalid or missing
    - The selected context does not exist
    - The API server cannot be reached
    """

    pass


class BinaryNotFoundError(SvcatAutoError):
    """Raised when a required binary (svcat, kubectl) is not on PATH."""

    pass


class CommandExecutionError(SvcatAutoError):
    """Raised when a command line could not be launched at all.

    A command that starts and exits with a non-zero code is not an error at
    this level; callers inspect ``CommandResult.exit_code`` for that.
    """

    pass


class SecretDecodeError(SvcatAutoError):
    """Raised when a binding secret document lacks a usable ``data`` map."""

    pass


class ValuesFileError(SvcatAutoError):
    """Raised when a chart values file is missing or not a YAML mapping."""

    pass


class PortUnavailableError(SvcatAutoError):
    """Raised when no free local port can be found for a port-forward."""

    pass
