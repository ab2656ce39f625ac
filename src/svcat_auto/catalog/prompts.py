"""Interactive prompts for the service catalog workflow."""

import questionary

from svcat_auto.styles import POINTER, PROMPT_STYLE, QMARK


def select_service_instance(names: list[str]) -> str | None:
    """Ask which service instance to bind.

    Args:
        names: Instance names to choose from.

    Returns:
        The chosen name, or None if the prompt was cancelled.

    """
    return questionary.select(
        "Pick an External Service to add to the selected application",
        choices=names,
        style=PROMPT_STYLE,
        pointer=POINTER,
        qmark=QMARK,
    ).ask()
