"""Process invocation for cluster tooling.

Commands are passed as argument lists, never through a shell. A command that
cannot be launched raises CommandExecutionError; a command that runs and
fails is returned with its exit code so the caller can decide what to report.
"""

import shutil
import subprocess

from icecream import ic

from svcat_auto.exceptions import BinaryNotFoundError, CommandExecutionError
from svcat_auto.models import CommandResult

_INSTALL_HINTS = {
    "svcat": "https://svc-cat.io/docs/install/#installing-the-service-catalog-cli",
    "kubectl": "https://kubernetes.io/docs/tasks/tools/",
}


def resolve_binary(name: str) -> str:
    """Resolve a binary name or path through PATH.

    Args:
        name: Executable name (``svcat``) or path.

    Returns:
        The absolute path of the executable.

    Raises:
        BinaryNotFoundError: If the executable cannot be found.

    """
    path = shutil.which(name)
    if path is None:
        hint = _INSTALL_HINTS.get(name)
        details = f" See: {hint}" if hint else ""
        raise BinaryNotFoundError(f"{name} binary not found. Please install it or ensure it's in your PATH.{details}")
    return path


def run_command(cmd: list[str], *, stdin: str | None = None) -> CommandResult:
    """Run a command and capture its output.

    Args:
        cmd: The command and its arguments.
        stdin: Optional text passed to the process on standard input.

    Returns:
        CommandResult with exit code, stdout and stderr.

    Raises:
        CommandExecutionError: If the process could not be started.

    """
    ic(cmd)
    try:
        completed = subprocess.run(
            cmd,
            input=stdin,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as err:
        raise CommandExecutionError(f"Failed to run {cmd[0]}: {err.strerror or err}") from err

    ic(completed.returncode)
    return CommandResult(
        exit_code=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )


def spawn_attached(cmd: list[str]) -> subprocess.Popen:
    """Start a command attached to the current terminal without waiting for it.

    Args:
        cmd: The command and its arguments.

    Returns:
        The process handle.

    Raises:
        CommandExecutionError: If the process could not be started.

    """
    ic(cmd)
    try:
        return subprocess.Popen(cmd)
    except OSError as err:
        raise CommandExecutionError(f"Failed to run {cmd[0]}: {err.strerror or err}") from err
