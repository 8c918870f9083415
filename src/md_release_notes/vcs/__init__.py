"""
Version control system (VCS) integration.

This package contains the :class:`GitClient` used to read commit history,
historical file contents and branch names from a Git repository.
"""

from .git_client import Commit, GitClient, GitError  # noqa: F401
