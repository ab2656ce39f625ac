#!/usr/bin/env python
"""Command-line interface for svcat-auto.

This module provides the main CLI entry point, handling command-line
argument parsing and dispatching to the session commands.
"""

import subprocess
import sys
from pathlib import Path

import click
from icecream import ic

from svcat_auto import __version__, console
from svcat_auto.core.session import Session
from svcat_auto.exceptions import BinaryNotFoundError, ClusterConnectionError
from svcat_auto.models import PortForwardSession


def wait_for_port_forward(session: PortForwardSession) -> None:
    """Keep the terminal attached to a port-forward until it exits.

    Args:
        session: The running port-forward.

    Raises:
        click.ClickException: If kubectl exits with a non-zero code.

    """
    console.summary_panel(
        "Port Forward",
        {
            "Pod": session.pod,
            "Local": f"127.0.0.1:{session.local_port}",
            "Remote": str(session.target_port),
        },
    )
    console.info("Press Ctrl+C to stop")

    try:
        exit_code = session.process.wait()
    except KeyboardInterrupt:
        session.process.terminate()
        try:
            session.process.wait(timeout=5)
        except subprocess.TimeoutExpired:
            session.process.kill()
        console.newline()
        console.success("Port forward stopped")
        return

    if exit_code != 0:
        raise click.ClickException(f"kubectl port-forward exited with code {exit_code}")


@click.command(help="Bind Service Catalog instances and port-forward to pods")
@click.option("--version", "-v", required=False, is_flag=True, help="print version")
@click.option("--debug", required=False, is_flag=True, help="print debug information")
@click.option("--select", required=False, is_flag=True, default=False, help="prompt for context select")
@click.option("--svcat", "svcat_binary", default="svcat", envvar="SVCAT_AUTO_SVCAT", show_default=True, help="svcat binary")
@click.option(
    "--kubectl", "kubectl_binary", default="kubectl", envvar="SVCAT_AUTO_KUBECTL", show_default=True, help="kubectl binary"
)
@click.option("--instances", required=False, is_flag=True, help="list External Service instances")
@click.option("--bind", required=False, is_flag=True, help="bind an External Service (default action)")
@click.option(
    "--chart",
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="chart to record binding keys in",
)
@click.option("--port-forward", required=False, is_flag=True, help="port-forward to a pod")
@click.option("--pod", required=False, help="pod to port-forward to")
@click.option(
    "--document",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="manifest describing the pod to port-forward to",
)
@click.option(
    "--local-port", required=False, type=click.IntRange(1, 65535), help="local port for port-forward"
)
@click.option("--show-data", required=False, nargs=2, metavar="RESOURCE/NAME KEY", help="print a data entry")
@click.option("--delete-data", required=False, nargs=2, metavar="RESOURCE/NAME KEY", help="delete a data entry")
def cli(
    version: bool,
    debug: bool,
    select: bool,
    svcat_binary: str,
    kubectl_binary: str,
    instances: bool,
    bind: bool,
    chart: Path | None,
    port_forward: bool,
    pod: str | None,
    document: Path | None,
    local_port: int | None,
    show_data: tuple[str, str] | None,
    delete_data: tuple[str, str] | None,
) -> None:
    """Process CLI arguments and execute the appropriate action.

    Args:
        version: Print version and exit.
        debug: Enable debug output.
        select: Prompt for Kubernetes context selection.
        svcat_binary: svcat executable name or path.
        kubectl_binary: kubectl executable name or path.
        instances: List service instances.
        bind: Run the binding workflow.
        chart: Chart directory for the binding workflow.
        port_forward: Port-forward to a pod.
        pod: Pod to port-forward to.
        document: Manifest describing the pod to port-forward to.
        local_port: Local port for port-forwarding.
        show_data: Resource reference and key to print.
        delete_data: Resource reference and key to delete.

    """
    if not debug:
        ic.disable()

    if version:
        click.echo(__version__)
        return

    actions = [instances, bind, port_forward, bool(show_data), bool(delete_data)]
    if sum(actions) > 1:
        raise click.UsageError("Choose only one of --instances, --bind, --port-forward, --show-data, --delete-data")
    if (pod or document or local_port) and not port_forward:
        raise click.UsageError("--pod, --document and --local-port require --port-forward")
    if chart and (instances or port_forward or show_data or delete_data):
        raise click.UsageError("--chart is only used with --bind")

    try:
        session = Session(select_context=select, svcat_binary=svcat_binary, kubectl_binary=kubectl_binary)
        ic(session)

        if instances:
            if session.list_instances() is None:
                sys.exit(1)
            return

        if port_forward:
            forward = session.port_forward(pod=pod, document=document, local_port=local_port)
            if forward is None:
                sys.exit(1)
            wait_for_port_forward(forward)
            return

        if show_data:
            if session.show_data(*show_data) is None:
                sys.exit(1)
            return

        if delete_data:
            if not session.delete_data(*delete_data):
                sys.exit(1)
            return

        if session.bind(chart=chart) is None:
            sys.exit(1)
    except ClusterConnectionError as e:
        console.error(f"Cluster connection failed: {e}")
        sys.exit(1)
    except BinaryNotFoundError as e:
        console.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    cli()
