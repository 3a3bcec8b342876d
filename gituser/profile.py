"""Profile management module for git-user."""

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .exceptions import (
    AlreadyImportedError,
    ConfigDirError,
    DuplicateProfileError,
    ProfileError,
    ProfileNotFoundError,
    StoreCorruptError,
    StoreIOError,
)

logger = logging.getLogger(__name__)

CONFIG_SUBDIR = Path(".config") / "git-user"
PROFILES_FILENAME = "profiles.json"

DIR_MODE = 0o755
FILE_MODE = 0o644

PROFILE_FIELDS = ("name", "email")


@dataclass
class Profile:
    """Git identity profile."""
    name: str
    email: str

    def to_dict(self) -> dict[str, str]:
        """Convert profile to dictionary for serialization."""
        return {
            "name": self.name,
            "email": self.email,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Profile":
        """Create profile from dictionary.

        Raises:
            StoreCorruptError: If the entry is not a name/email object
        """
        if not isinstance(data, dict):
            raise StoreCorruptError(f"Invalid profile entry: {data!r}")

        unknown = set(data) - set(PROFILE_FIELDS)
        if unknown:
            raise StoreCorruptError(
                f"Unknown profile fields: {', '.join(sorted(unknown))}"
            )

        for field in PROFILE_FIELDS:
            if not isinstance(data.get(field), str):
                raise StoreCorruptError(
                    f"Profile entry is missing a string '{field}' field"
                )

        return cls(name=data["name"], email=data["email"])

    def matches(self, name: str, email: str) -> bool:
        """Check whether this profile is exactly the given identity."""
        return self.name == name and self.email == email

    def __str__(self) -> str:
        return f"{self.name} - {self.email}"


def default_config_dir() -> Path:
    """Get the per-user configuration directory."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise ConfigDirError(
            "Could not determine the home directory",
            details=str(e),
        ) from e
    return home / CONFIG_SUBDIR


class ProfileStore:
    """Persists the ordered list of profiles as a JSON document."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize profile store.

        Args:
            config_dir: Directory holding profiles.json. Defaults to
                ~/.config/git-user, resolved lazily on first use.
        """
        self.config_dir = config_dir

    def locate(self) -> Path:
        """Get the profiles document path, creating its directory if needed."""
        config_dir = self.config_dir or default_config_dir()
        if not config_dir.is_dir():
            try:
                config_dir.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
            except OSError as e:
                raise ConfigDirError(
                    f"Failed to create config directory {config_dir}",
                    details=str(e),
                ) from e
            logger.debug(f"Created config directory {config_dir}")
        return (config_dir / PROFILES_FILENAME).absolute()

    def load(self) -> list[Profile]:
        """Load profiles from disk.

        A missing document is an empty list.
        """
        path = self.locate()
        if not path.exists():
            logger.debug(f"No profiles file at {path}")
            return []

        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise StoreCorruptError(f"Failed to parse profiles: {e}") from e
        except OSError as e:
            raise StoreIOError(f"Failed to read profiles: {e}") from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise StoreCorruptError(
                f"Failed to parse profiles: {e}",
                details=str(path),
            ) from e

        if not isinstance(data, list):
            raise StoreCorruptError(
                "Profiles file must contain a JSON array",
                details=str(path),
            )

        profiles = [Profile.from_dict(entry) for entry in data]
        logger.debug(f"Loaded {len(profiles)} profiles from {path}")
        return profiles

    def save(self, profiles: list[Profile]) -> None:
        """Save profiles to disk.

        The document is written to a temporary file next to it and renamed
        into place.
        """
        path = self.locate()
        content = json.dumps(
            [p.to_dict() for p in profiles], indent=2, ensure_ascii=False
        ) + "\n"

        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{PROFILES_FILENAME}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
            os.chmod(tmp_name, FILE_MODE)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise StoreIOError(f"Failed to save profiles: {e}") from e

        logger.debug(f"Saved {len(profiles)} profiles to {path}")

    def add(self, name: str, email: str) -> Profile:
        """Add a new profile.

        Raises:
            DuplicateProfileError: If a profile with the same name exists
        """
        if not name or not email:
            raise ProfileError("Profile name and email cannot be empty")

        profiles = self.load()
        if any(p.name == name for p in profiles):
            raise DuplicateProfileError(
                f"profile with name '{name}' already exists",
                profile_name=name,
            )

        profile = Profile(name=name, email=email)
        profiles.append(profile)
        self.save(profiles)
        return profile

    def delete(self, name: str) -> Profile:
        """Delete the profile with the given name.

        Returns:
            The removed profile

        Raises:
            ProfileNotFoundError: If no profile has that name
        """
        profiles = self.load()
        for index, profile in enumerate(profiles):
            if profile.name == name:
                break
        else:
            raise ProfileNotFoundError(
                f"profile with name '{name}' not found",
                profile_name=name,
            )

        del profiles[index]
        self.save(profiles)
        return profile

    def contains(self, name: str, email: str) -> bool:
        """Check whether an identical profile is stored."""
        return any(p.matches(name, email) for p in self.load())

    def import_profile(self, name: str, email: str) -> Profile:
        """Store an identity taken from the git configuration.

        Raises:
            AlreadyImportedError: If the same name/email pair is stored
            DuplicateProfileError: If another profile already uses the name
        """
        profiles = self.load()
        if any(p.matches(name, email) for p in profiles):
            raise AlreadyImportedError(
                "current git profile already exists in profiles",
                profile_name=name,
            )
        if any(p.name == name for p in profiles):
            raise DuplicateProfileError(
                f"profile with name '{name}' already exists",
                profile_name=name,
                details=f"Delete it first with: git-user delete --name {name}",
            )

        profile = Profile(name=name, email=email)
        profiles.append(profile)
        self.save(profiles)
        return profile
