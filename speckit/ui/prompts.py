"""Interactive prompts for SPECKIT.

This module provides Questionary-based user input prompts with
consistent styling and error handling.
"""

from typing import Optional

import questionary
from questionary import Style

from speckit.utils.errors import UserCancelledError
from speckit.utils.logging import log_message

# Custom style matching the application theme
custom_style = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
        ("separator", "fg:cyan"),
        ("instruction", "fg:white"),
        ("text", ""),
        ("disabled", "fg:gray italic"),
    ]
)


def prompt_confirm(message: str, default: bool = True) -> bool:
    """Prompt for yes/no confirmation.

    Args:
        message: Question to ask
        default: Default value if user presses Enter

    Returns:
        True for yes, False for no

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt confirm: {message}")

    try:
        result = questionary.confirm(
            message,
            default=default,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled confirmation prompt")

        log_message(f"User response: {result}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


def prompt_select(
    message: str,
    choices: dict[str, str],
    default: Optional[str] = None,
) -> str:
    """Prompt for single selection from a keyed list.

    Args:
        message: Prompt message
        choices: Mapping of returned key to displayed title
        default: Key selected initially

    Returns:
        Key of the selected choice

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt select: {message}")

    options = [
        questionary.Choice(title=f"{title} ({key})", value=key) for key, title in choices.items()
    ]
    default_option = next((o for o in options if o.value == default), None)

    try:
        result = questionary.select(
            message,
            choices=options,
            default=default_option,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled selection prompt")

        log_message(f"User selected: {result}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


__all__ = [
    "custom_style",
    "prompt_confirm",
    "prompt_select",
]
