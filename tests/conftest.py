"""Test configuration and fixtures."""

import importlib
from collections.abc import Generator, Sequence
from types import ModuleType
from pathlib import Path

import pytest

from gituser.exceptions import GitNotFoundError
from gituser.git import GitIdentity
from gituser.profile import ProfileStore


class FakeGit:
    """In-memory stand-in for `git config --global`."""

    def __init__(
        self,
        values: dict[str, str] | None = None,
        fail_keys: Sequence[str] = (),
        installed: bool = True,
    ) -> None:
        self.values = dict(values or {})
        self.fail_keys = set(fail_keys)
        self.installed = installed
        self.calls: list[list[str]] = []

    def __call__(self, args: Sequence[str]) -> tuple[str, int]:
        args = list(args)
        self.calls.append(args)
        if not self.installed:
            raise GitNotFoundError("Git is not installed")
        assert args[:2] == ["config", "--global"]

        key = args[2]
        if len(args) == 4:
            if key in self.fail_keys:
                return "", 255
            self.values[key] = args[3]
            return "", 0

        if key not in self.values:
            return "", 1
        return self.values[key] + "\n", 0

    @property
    def set_calls(self) -> list[list[str]]:
        return [call for call in self.calls if len(call) == 4]


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temporary home directory for testing."""
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def profiles_file(temp_home: Path) -> Path:
    return temp_home / ".config" / "git-user" / "profiles.json"


@pytest.fixture
def store(temp_home: Path) -> ProfileStore:
    """Create profile store under the temporary home."""
    return ProfileStore()


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit()


@pytest.fixture
def cli_module() -> ModuleType:
    """The gituser.cli module itself.

    The package re-exports the click group under the same name, so
    `gituser.cli` as an attribute path resolves to the group, not the module.
    """
    return importlib.import_module("gituser.cli")


@pytest.fixture
def cli_env(
    temp_home: Path,
    fake_git: FakeGit,
    cli_module: ModuleType,
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[FakeGit, None, None]:
    """Point the CLI at a fresh store and the fake git runner."""
    monkeypatch.setattr(cli_module, "store", ProfileStore())
    monkeypatch.setattr(cli_module, "identity", GitIdentity(runner=fake_git))
    yield fake_git


@pytest.fixture
def make_git() -> type[FakeGit]:
    """Factory for fake git runners with preset values."""
    return FakeGit
