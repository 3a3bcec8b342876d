"""git-user - Switch the global git identity between stored profiles."""

from gituser.cli import cli
from gituser.git import GitIdentity
from gituser.profile import Profile, ProfileStore
from gituser.version import __version__

__all__ = ["GitIdentity", "Profile", "ProfileStore", "__version__", "cli"]
