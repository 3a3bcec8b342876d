"""Git global identity configuration."""

import logging
import subprocess
from collections.abc import Callable, Sequence

from .exceptions import (
    GitConfigError,
    GitNotFoundError,
    GitValueMissingError,
    PartialSetError,
)

logger = logging.getLogger(__name__)

NAME_KEY = "user.name"
EMAIL_KEY = "user.email"

# Maps git arguments (without the leading "git") to (stdout, exit status)
CommandRunner = Callable[[Sequence[str]], tuple[str, int]]


def run_git(args: Sequence[str]) -> tuple[str, int]:
    """Run the git executable.

    Returns:
        Tuple of (stdout, returncode)
    """
    cmd = ["git", *args]
    logger.debug(f"Running: {' '.join(cmd)}")
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        logger.error("Git not found")
        raise GitNotFoundError(
            "Git is not installed",
            details="Please install Git to use this tool",
        ) from e
    except OSError as e:
        raise GitNotFoundError("Failed to run git", details=str(e)) from e

    if result.returncode != 0 and result.stderr:
        logger.debug(f"git exited with {result.returncode}: {result.stderr.strip()}")
    return result.stdout, result.returncode


class GitIdentity:
    """Reads and writes user.name and user.email in the global git config."""

    def __init__(self, runner: CommandRunner | None = None) -> None:
        self.runner = runner or run_git

    def get(self, key: str) -> str:
        """Get a global git config value.

        Args:
            key: Config key, e.g. user.name

        Returns:
            The value with surrounding whitespace removed

        Raises:
            GitValueMissingError: If git reports no value for the key
            GitNotFoundError: If git cannot be run
        """
        stdout, returncode = self.runner(["config", "--global", key])
        if returncode != 0:
            raise GitValueMissingError(key, returncode=returncode)
        return stdout.strip()

    def _set_value(self, key: str, value: str) -> None:
        _, returncode = self.runner(["config", "--global", key, value])
        if returncode != 0:
            raise GitConfigError(
                f"Failed to set {key}",
                returncode=returncode,
                details=f"git config --global {key} exited with status {returncode}",
            )

    def set(self, name: str, email: str) -> None:
        """Set the global git identity.

        Raises:
            GitConfigError: If user.name could not be set
            PartialSetError: If user.name was set but user.email was not
        """
        self._set_value(NAME_KEY, name)
        try:
            self._set_value(EMAIL_KEY, email)
        except GitConfigError as e:
            logger.warning(f"{NAME_KEY} was updated but {EMAIL_KEY} was not")
            raise PartialSetError(
                f"Git identity partially updated: {NAME_KEY} is now '{name}' "
                f"but {EMAIL_KEY} could not be set",
                returncode=e.returncode,
                details=e.details,
            ) from e
        logger.debug(f"Global identity set to {name} <{email}>")

    def current(self) -> tuple[str, str] | None:
        """Get the current global identity.

        Returns:
            Tuple of (name, email), or None if either is unset or git fails
        """
        try:
            name = self.get(NAME_KEY)
            email = self.get(EMAIL_KEY)
        except GitConfigError as e:
            logger.debug(f"No current identity: {e}")
            return None
        if not name or not email:
            return None
        return name, email
