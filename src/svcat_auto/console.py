"""Rich console utilities for styled terminal output.

Every operator-facing message goes through this module, so the workflows
report errors, warnings and results with the same look.
"""

from collections.abc import Generator, Iterable
from contextlib import contextmanager

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

from svcat_auto.models import ServiceInstance

_THEME = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red bold",
        "highlight": "cyan bold",
        "muted": "dim",
    }
)

# (theme style, marker) per message level
_MARKERS = {
    "info": ("info", "ℹ"),
    "success": ("success", "✓"),
    "warning": ("warning", "⚠"),
    "error": ("error", "✗"),
    "action": ("info", "→"),
    "step": ("muted", "•"),
}

_INSTANCE_COLUMNS = ("Name", "Namespace", "Class", "Plan", "Status")

console = Console(theme=_THEME)


def _emit(level: str, message: str) -> None:
    style, marker = _MARKERS[level]
    console.print(f"[{style}]{marker}[/{style}] {message}")


def info(message: str) -> None:
    """Print an informational message."""
    _emit("info", message)


def success(message: str) -> None:
    """Print a success message."""
    _emit("success", message)


def warning(message: str) -> None:
    """Print a warning message."""
    _emit("warning", message)


def error(message: str) -> None:
    """Print an error message.

    Workflows report a failed step through this and then stop, rather than
    raising.
    """
    _emit("error", message)


def action(message: str) -> None:
    """Print the action about to be taken against the cluster."""
    _emit("action", message)


def step(message: str) -> None:
    """Print a completed sub-step of a workflow."""
    _emit("step", message)


def highlight(text: str) -> str:
    """Return text wrapped in highlight markup, for embedding in messages."""
    return f"[highlight]{text}[/highlight]"


def plain(text: str) -> None:
    """Print text verbatim, without markup or highlighting.

    Used for blocks the operator is expected to copy, such as usage notes
    containing ``[`` or data entries read from the cluster.
    """
    console.print(text, markup=False, highlight=False)


@contextmanager
def spinner(message: str) -> Generator[None, None, None]:
    """Show a spinner while an svcat, kubectl or API call runs.

    Args:
        message: Status text shown next to the spinner.

    Yields:
        None

    """
    with console.status(f"[info]{message}[/info]", spinner="dots"):
        yield


def instances_table(instances: Iterable[ServiceInstance]) -> None:
    """Print service instances as a table.

    Columns missing from the listing are left blank.

    Args:
        instances: Instances in listing order.

    """
    table = Table(title="External Services", header_style="bold")
    for column in _INSTANCE_COLUMNS:
        table.add_column(column)

    for instance in instances:
        table.add_row(
            *(
                value or ""
                for value in (instance.name, instance.namespace, instance.class_name, instance.plan, instance.status)
            )
        )

    console.print(table)


def summary_panel(title: str, items: dict[str, str]) -> None:
    """Print labelled values in a bordered panel.

    Args:
        title: Panel title.
        items: Label to value, in display order.

    """
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="bold")
    grid.add_column(style="highlight")
    for label, value in items.items():
        grid.add_row(f"{label}:", value)

    console.print(Panel(grid, title=f"[bold]{title}[/bold]", border_style="success"))


def newline() -> None:
    """Print an empty line."""
    console.print()
