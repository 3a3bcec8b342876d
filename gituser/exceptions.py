"""Custom exceptions for git-user."""


class GitUserError(Exception):
    """Base exception for git-user."""

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ConfigDirError(GitUserError):
    """Home or configuration directory is unavailable."""
    pass


class StoreIOError(GitUserError):
    """Profiles document could not be read or written."""
    pass


class StoreCorruptError(GitUserError):
    """Profiles document is not a valid profile list."""
    pass


class ProfileError(GitUserError):
    """Profile-related errors."""

    def __init__(
        self,
        message: str,
        profile_name: str | None = None,
        details: str | None = None,
    ) -> None:
        self.profile_name = profile_name
        super().__init__(message, details=details)


class DuplicateProfileError(ProfileError):
    """A profile with the same name is already stored."""
    pass


class ProfileNotFoundError(ProfileError):
    """No stored profile has the requested name."""
    pass


class EmptyCatalogueError(ProfileError):
    """There are no stored profiles to choose from."""
    pass


class InvalidSelectionError(ProfileError):
    """The chosen profile number is not a valid index."""
    pass


class AlreadyImportedError(ProfileError):
    """The current identity is already stored."""
    pass


class NoCurrentIdentityError(ProfileError):
    """Git has no complete global identity to import."""
    pass


class GitConfigError(GitUserError):
    """Errors related to Git configuration."""

    def __init__(
        self,
        message: str,
        returncode: int | None = None,
        details: str | None = None,
    ) -> None:
        self.returncode = returncode
        super().__init__(message, details=details)


class GitNotFoundError(GitConfigError):
    """The git executable could not be run."""
    pass


class GitValueMissingError(GitConfigError):
    """A git config key has no value in the global scope."""

    def __init__(self, key: str, returncode: int | None = None) -> None:
        self.key = key
        super().__init__(f"No global value set for {key}", returncode=returncode)


class PartialSetError(GitConfigError):
    """user.name was updated but user.email was not."""
    pass
