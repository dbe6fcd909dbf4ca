"""Rich-based console output utilities.

This module provides the shared consoles and the colored status helpers
used by every command.
"""

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from speckit import __version__

custom_theme = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "warning": "bold yellow",
        "info": "bold blue",
        "header": "bold magenta",
    }
)

# Global console instances
console = Console(theme=custom_theme)
console_err = Console(theme=custom_theme, stderr=True)

BANNER = """
███████╗██████╗ ███████╗ ██████╗██╗  ██╗██╗████████╗
██╔════╝██╔══██╗██╔════╝██╔════╝██║ ██╔╝██║╚══██╔══╝
███████╗██████╔╝█████╗  ██║     █████╔╝ ██║   ██║
╚════██║██╔═══╝ ██╔══╝  ██║     ██╔═██╗ ██║   ██║
███████║██║     ███████╗╚██████╗██║  ██╗██║   ██║
╚══════╝╚═╝     ╚══════╝ ╚═════╝╚═╝  ╚═╝╚═╝   ╚═╝
"""

TAGLINE = "Spec-Driven Development Toolkit"

# Cycled per visible character, shifted by one on every banner row
RAINBOW = (
    "bright_red",
    "bright_yellow",
    "bright_green",
    "bright_cyan",
    "bright_blue",
    "bright_magenta",
)


def print_error(message: str) -> None:
    """Print error message in red.

    Args:
        message: Error message to display
    """
    from speckit.utils.logging import log_message

    console_err.print(f"[error][[ERROR]][/error] [red]{message}[/red]")
    log_message(f"ERROR: {message}")


def print_success(message: str) -> None:
    """Print success message in green.

    Args:
        message: Success message to display
    """
    from speckit.utils.logging import log_message

    console.print(f"[success][[SUCCESS]][/success] [green]{message}[/green]")
    log_message(f"SUCCESS: {message}")


def print_warning(message: str) -> None:
    """Print warning message in yellow.

    Args:
        message: Warning message to display
    """
    from speckit.utils.logging import log_message

    console.print(f"[warning][[WARNING]][/warning] [yellow]{message}[/yellow]")
    log_message(f"WARNING: {message}")


def print_info(message: str) -> None:
    """Print info message in blue/cyan.

    Args:
        message: Info message to display
    """
    from speckit.utils.logging import log_message

    console.print(f"[info][[INFO]][/info] [cyan]{message}[/cyan]")
    log_message(f"INFO: {message}")


def print_header(title: str) -> None:
    """Print section header in magenta.

    Args:
        title: Header title to display
    """
    console.print()
    console.print(f"[header]=== {title} ===[/header]")
    console.print()


def build_banner() -> Text:
    """Build the rainbow-colored banner text.

    Returns:
        Rich Text with one style span per visible character
    """
    text = Text()
    for row, line in enumerate(BANNER.strip("\n").splitlines()):
        visible = 0
        for char in line:
            if char == " ":
                text.append(char)
                continue
            text.append(char, style=f"bold {RAINBOW[(row + visible) % len(RAINBOW)]}")
            visible += 1
        text.append("\n")
    return text


def show_banner() -> None:
    """Display ASCII art banner."""
    console.print(build_banner())
    console.print(f"[bold bright_yellow]{TAGLINE}[/bold bright_yellow]")
    console.print(f"[white]Version {__version__}[/white]")
    console.print()


def show_version() -> None:
    """Display version information."""
    console.print(f"[bold]SPECKIT[/bold] v{__version__}")


__all__ = [
    "console",
    "console_err",
    "custom_theme",
    "BANNER",
    "TAGLINE",
    "build_banner",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "show_banner",
    "show_version",
]
