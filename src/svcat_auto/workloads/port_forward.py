"""Port-forwarding to pods.

Resolves the target pod (given explicitly, described by a manifest, or
picked from the pods of the current namespace), asks for the remote port and
starts ``kubectl port-forward`` attached to the terminal.
"""

import socket
from pathlib import Path

import questionary
from icecream import ic

from svcat_auto import console
from svcat_auto.core.cluster import Cluster
from svcat_auto.core.tools import Kubectl
from svcat_auto.exceptions import CommandExecutionError, PortUnavailableError
from svcat_auto.models import PodLookup, PortForwardSession
from svcat_auto.styles import POINTER, PROMPT_STYLE, QMARK
from svcat_auto.workloads.documents import find_kind_name_in_document

MAX_PORT_COUNT = 65535
LOCAL_PORT_SEARCH_START = 10000
_POD_KINDS = ("pod", "pods")


def validate_port(value: str) -> bool | str:
    """Validate a port number typed by the operator.

    Args:
        value: The raw input.

    Returns:
        True if valid, or an error message string if invalid.

    """
    try:
        port = int(value)
    except ValueError:
        port = 0
    if 0 < port <= MAX_PORT_COUNT:
        return True
    return f"Invalid port. Please enter a valid numerical port: 1-{MAX_PORT_COUNT}"


def prompt_for_port(pod_name: str) -> int | None:
    """Ask for the port to forward to on a pod.

    Args:
        pod_name: The pod being forwarded to.

    Returns:
        The port, or None if the prompt was cancelled.

    """
    answer: str | None = questionary.text(
        f"The numeric port to forward to on pod {pod_name}",
        placeholder="8001",
        validate=validate_port,
        style=PROMPT_STYLE,
        qmark=QMARK,
    ).ask()
    return int(answer) if answer is not None else None


def find_port_forwardable_pods(cluster: Cluster, document: Path | None = None) -> PodLookup:
    """Find pods to offer for port-forwarding.

    A manifest describing a pod resolves to that pod alone; any other
    manifest, or none, falls back to every pod in the current namespace.

    Args:
        cluster: Cluster used to list pods.
        document: Manifest standing in for the open document.

    Returns:
        The candidate pods.

    """
    kind_name = find_kind_name_in_document(document) if document is not None else None
    ic(kind_name)

    if kind_name is not None:
        kind, _, pod_name = kind_name.partition("/")
        if kind in _POD_KINDS:
            return PodLookup(succeeded=True, pods=[pod_name], from_open_document=True)

    return cluster.find_all_pods()


def find_free_port(start: int = LOCAL_PORT_SEARCH_START, host: str = "127.0.0.1") -> int:
    """Find the first local port at or above ``start`` that can be bound.

    Raises:
        PortUnavailableError: If every port up to 65535 is taken.

    """
    for port in range(start, MAX_PORT_COUNT + 1):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            try:
                sock.bind((host, port))
            except OSError:
                continue
            return port

    raise PortUnavailableError(f"No free local port between {start} and {MAX_PORT_COUNT}")


def port_forward_to_pod(
    kubectl: Kubectl,
    pod_name: str,
    target_port: int,
    local_port: int | None = None,
) -> PortForwardSession:
    """Start ``kubectl port-forward`` to a pod.

    The process is not awaited here.

    Args:
        kubectl: kubectl wrapper.
        pod_name: The pod to forward to.
        target_port: Port on the pod.
        local_port: Local port; a free one is found if None.

    Returns:
        The running session.

    Raises:
        PortUnavailableError: If no local port is free.
        CommandExecutionError: If kubectl could not be started.

    """
    used_port = local_port if local_port else find_free_port()
    console.action(f"Port forwarding to pod {console.highlight(pod_name)} at port {target_port}")

    process = kubectl.invoke_in_terminal(["port-forward", pod_name, f"{used_port}:{target_port}"])
    return PortForwardSession(
        pod=pod_name,
        local_port=used_port,
        target_port=target_port,
        process=process,
    )


def _forward_with_prompt(kubectl: Kubectl, pod_name: str, local_port: int | None) -> PortForwardSession | None:
    target_port = prompt_for_port(pod_name)
    if target_port is None:
        return None

    try:
        return port_forward_to_pod(kubectl, pod_name, target_port, local_port)
    except (PortUnavailableError, CommandExecutionError) as e:
        console.error(f"Could not port-forward to {pod_name}: {e}")
        return None


def port_forward(
    cluster: Cluster,
    kubectl: Kubectl,
    *,
    pod: str | None = None,
    document: Path | None = None,
    local_port: int | None = None,
) -> PortForwardSession | None:
    """Resolve a pod and port, then start port-forwarding.

    Args:
        cluster: Cluster used for pod discovery.
        kubectl: kubectl wrapper.
        pod: Explicit pod name; skips discovery.
        document: Manifest standing in for the open document.
        local_port: Local port; a free one from 10000 upward if None.

    Returns:
        The running session, or None if resolution failed or was cancelled.

    """
    if pod:
        return _forward_with_prompt(kubectl, pod, local_port)

    lookup = find_port_forwardable_pods(cluster, document)
    if not lookup.succeeded:
        console.error("Error while fetching pods for port-forward")
        return None

    if lookup.from_open_document and len(lookup.pods) == 1:
        return _forward_with_prompt(kubectl, lookup.pods[0], local_port)

    if not lookup.pods:
        console.error(f"No pods found in namespace {console.highlight(cluster.namespace)}")
        return None

    pod_selection: str | None = questionary.select(
        "Select a pod to port-forward to",
        choices=lookup.pods,
        style=PROMPT_STYLE,
        pointer=POINTER,
        qmark=QMARK,
    ).ask()
    if pod_selection is None:
        console.warning("Pod selection cancelled.")
        return None

    return _forward_with_prompt(kubectl, pod_selection, local_port)
