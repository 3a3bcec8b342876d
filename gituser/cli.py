"""Command-line interface."""

import logging
import sys
from collections.abc import Callable, Sequence
from functools import wraps
from typing import Any, TypeVar, cast

import click

from .exceptions import (
    EmptyCatalogueError,
    GitConfigError,
    GitUserError,
    NoCurrentIdentityError,
)
from .git import EMAIL_KEY, NAME_KEY, GitIdentity
from .profile import ProfileStore
from .ui import (
    print_banner,
    print_profile_list,
    print_selection_menu,
    print_usage,
    prompt_profile_number,
)
from .ui_common import print_error, print_line, print_warning
from .version import __version__

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])

# Module-level collaborators, replaced in tests
store = ProfileStore()
identity = GitIdentity()


def handle_errors(f: F) -> F:
    """Decorator to handle errors in CLI commands."""
    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except GitUserError as e:
            logger.debug(f"{type(e).__name__}: {e}")
            print_error(str(e), e.details)
            sys.exit(1)
        except (click.exceptions.Exit, click.Abort, click.ClickException):
            raise
        except Exception as e:
            logger.error(f"Unexpected error: {str(e)}", exc_info=True)
            print_error(f"Unexpected error: {str(e)}")
            sys.exit(1)
    return cast(F, wrapper)


def print_startup_banner() -> None:
    """Show the current git identity and whether it is stored."""
    current = identity.current()
    imported = False
    if current is not None:
        try:
            imported = store.contains(*current)
        except GitUserError as e:
            logger.debug(f"Could not check stored profiles: {e}")
    print_banner(current, imported)


class GitUserGroup(click.Group):
    """Group that prints the banner before any subcommand is resolved.

    The banner comes from `invoke`, so it also precedes the usage line and
    unknown-command errors. `--help` and `--version` are eager options that
    click answers while parsing, before `invoke`, so they print without it.
    """

    def invoke(self, ctx: click.Context) -> Any:
        print_startup_banner()
        return super().invoke(ctx)

    def resolve_command(
        self, ctx: click.Context, args: Sequence[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and self.get_command(ctx, args[0]) is None:
            print_usage(unknown=True)
            ctx.exit(1)
        return super().resolve_command(ctx, list(args))


def enable_debug(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if value:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug mode enabled")


@click.group(cls=GitUserGroup, invoke_without_command=True)
@click.option(
    '--debug',
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=enable_debug,
    help='Enable debug logging',
)
@click.version_option(__version__, prog_name="git-user")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Switch the global git identity between stored profiles."""
    if ctx.invoked_subcommand is None:
        print_usage()
        ctx.exit(0)


@cli.command()
@click.option("--name", help="Git user name")
@click.option("--email", help="Git user email")
@handle_errors
def add(name: str | None = None, email: str | None = None) -> None:
    """Store a new profile."""
    if not name or not email:
        print_error("Both --name and --email flags are required")
        sys.exit(1)

    store.add(name, email)
    print_line("Profile added successfully.")


@cli.command()
@click.option("--name", help="Git user name to delete")
@handle_errors
def delete(name: str | None = None) -> None:
    """Delete a stored profile by name."""
    if not name:
        print_error("--name flag is required")
        sys.exit(1)

    removed = store.delete(name)
    print_line("Profile deleted successfully.")

    current = identity.current()
    if current is not None and removed.matches(*current):
        print_warning(
            f"'{removed}' is still the active git identity but is no longer stored"
        )


@cli.command(name="list")
@handle_errors
def list_profiles() -> None:
    """List stored profiles, marking the active one."""
    profiles = store.load()
    print_profile_list(profiles, identity.current())


@cli.command()
@handle_errors
def switch() -> None:
    """Choose a stored profile and make it the global git identity."""
    profiles = store.load()
    if not profiles:
        raise EmptyCatalogueError(
            "no profiles found, add a profile using 'git-user add'"
        )

    print_selection_menu(profiles)
    selected = profiles[prompt_profile_number(len(profiles))]

    identity.set(selected.name, selected.email)
    print_line(f"Profile switched to: {selected}")


def get_current_value(key: str, field: str) -> str:
    """Get a global identity value that import requires."""
    message = f"no current git user {field} found"
    try:
        value = identity.get(key)
    except GitConfigError as e:
        raise NoCurrentIdentityError(message, details=str(e)) from e
    if not value:
        raise NoCurrentIdentityError(message)
    return value


@cli.command(name="import")
@handle_errors
def import_current() -> None:
    """Store the current global git identity as a profile."""
    name = get_current_value(NAME_KEY, "name")
    email = get_current_value(EMAIL_KEY, "email")

    profile = store.import_profile(name, email)
    print_line(f"Current git profile imported: {profile}")
