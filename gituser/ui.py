"""UI module for git-user."""

from rich.prompt import Prompt

from .exceptions import InvalidSelectionError
from .profile import Profile
from .ui_common import console, print_line

SUBCOMMANDS = ("add", "delete", "list", "switch", "import")
USAGE = f"Usage: git-user [{'|'.join(SUBCOMMANDS)}]"


def print_usage(unknown: bool = False) -> None:
    """Print the one-line usage string."""
    if unknown:
        print_line(f"Unknown command. {USAGE}")
    else:
        print_line(USAGE)


def print_current_identity(name: str, email: str) -> None:
    print_line(f"Current active git profile: {name} - {email}")


def print_import_hint() -> None:
    """Print the note shown when the current identity is not stored."""
    print_line("Note: The current git profile is not imported in the profiles list.")
    print_line("You can import it using the 'import' subcommand.")


def print_banner(identity: tuple[str, str] | None, imported: bool) -> None:
    """Print the startup banner.

    Args:
        identity: Current (name, email), or None when unset
        imported: Whether the current identity is in the stored profiles
    """
    if identity is None:
        print_line("No active git profile is set in the global configuration.")
    else:
        print_current_identity(*identity)
        if not imported:
            print_import_hint()
    print_line(f"Available subcommands: {', '.join(SUBCOMMANDS)}")


def print_profile_list(
    profiles: list[Profile],
    identity: tuple[str, str] | None,
) -> None:
    """Print stored profiles, marking the one matching the current identity."""
    print_line("Stored profiles:")
    found_current = False
    for index, profile in enumerate(profiles):
        marker = " "
        if (
            not found_current
            and identity is not None
            and profile.matches(*identity)
        ):
            marker = "*"
            found_current = True
        print_line(f"[{index}] {profile} {marker}")

    if identity is not None and not found_current:
        print_current_identity(*identity)
        print_import_hint()


def print_selection_menu(profiles: list[Profile]) -> None:
    print_line("Select a profile:")
    for index, profile in enumerate(profiles):
        print_line(f"[{index}] {profile}")


def prompt_profile_number(count: int) -> int:
    """Prompt for a profile number.

    Args:
        count: Number of profiles on offer

    Returns:
        Zero-based index of the chosen profile

    Raises:
        InvalidSelectionError: If the answer is not an index below count
    """
    try:
        answer = Prompt.ask("Enter profile number", console=console)
    except EOFError:
        raise InvalidSelectionError("invalid selection", details="No input received") from None

    answer = answer.strip()
    try:
        index = int(answer)
    except ValueError:
        raise InvalidSelectionError(
            "invalid selection",
            details=f"Not a number: {answer!r}",
        ) from None

    if not 0 <= index < count:
        raise InvalidSelectionError(
            "invalid selection",
            details=f"Choose a number between 0 and {count - 1}",
        )
    return index
