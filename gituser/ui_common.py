"""Common UI utilities shared across modules."""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

# Create a custom theme for consistent styling
theme = Theme(
    {
        "warning": "yellow",
        "error": "red",
    }
)

# Status lines on stdout stay plain text: no styling, wrapping or highlighting
console = Console(highlight=False, soft_wrap=True, emoji=False)
err_console = Console(
    theme=theme, stderr=True, highlight=False, soft_wrap=True, emoji=False
)


def print_line(text: str) -> None:
    """Print a line of plain text to stdout."""
    console.print(text, markup=False)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message."""
    err_console.print(f"[error]Error:[/error] {escape(message)}")
    if details:
        err_console.print(f"[dim]{escape(details)}[/dim]")


def print_warning(message: str) -> None:
    """Print warning message."""
    err_console.print(f"[warning]Warning:[/warning] {escape(message)}")
