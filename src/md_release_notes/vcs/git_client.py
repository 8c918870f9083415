"""
Git client implementation for md_release_notes.

This module wraps the handful of read-only Git queries the release notes
generator needs: listing the commits between two refs, reading a file as
it existed at a given commit, and naming the ref a commit is reachable
from. All subprocess calls go through :meth:`GitClient._run` so that unit
tests can mock them easily.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when the root logger is not
# configured. Logs will propagate to the root when configured by the CLI.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class Commit:
    """A single commit as reported by ``git log``."""

    identifier: str  # full commit hash
    summary: str  # subject line


class GitError(Exception):
    """Raised when a Git command fails."""

    def __init__(self, message: str, command: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.command = command or []

    @property
    def command_line(self) -> str:
        return " ".join(self.command)


class GitClient:
    """Client for querying a Git repository."""

    def __init__(self, repo_root: Path) -> None:
        self.repo_root = repo_root

    # ------------------------------------------------------------------
    # Static helpers
    # ------------------------------------------------------------------
    @staticmethod
    def find_repo_root(start: Path) -> Optional[Path]:
        """Find the root of the Git repository starting from ``start``.

        Walk upwards until a ``.git`` entry is found or the filesystem
        root is reached. ``.git`` may be a file for worktrees and
        submodules, so only existence is checked.
        """
        current = start.resolve()
        while True:
            if (current / ".git").exists():
                return current
            if current.parent == current:
                # reached filesystem root
                return None
            current = current.parent

    # ------------------------------------------------------------------
    # Basic Git commands
    # ------------------------------------------------------------------
    def _run(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        """Run a Git command in the repository root.

        Raises
        ------
        GitError
            If the command exits with a non-zero status when ``check`` is
            True, or if the ``git`` executable cannot be started at all.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding='utf-8',
                errors='replace',  # Replace invalid characters instead of failing
            )
        except OSError as e:
            # Missing git binary or unusable working directory
            logger.error("Git command failed: %s (%s)", " ".join(full_cmd), e)
            raise GitError(f"Unable to run git: {e}", full_cmd) from e

        if check and result.returncode != 0:
            logger.error(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(result.stderr.strip() or result.stdout.strip(), full_cmd)
        return result

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------
    def log_commits(self, from_ref: str, to_ref: str) -> List[Commit]:
        """List the non-merge commits reachable from ``to_ref`` but not ``from_ref``.

        Parameters
        ----------
        from_ref : str
            The ref the release starts from (excluded).
        to_ref : str
            The ref the release ends at (included).

        Returns
        -------
        List[Commit]
            Commits in the order git reports them, most recent first.

        Raises
        ------
        GitError
            If the log cannot be produced (unknown refs, not a repository).
        """
        result = self._run(
            ["log", f"{from_ref}..{to_ref}", "--no-merges", "--pretty=format:%H %s"],
            check=True,
        )
        commits = []
        for line in result.stdout.strip().splitlines():
            if not line.strip():
                continue
            identifier, _, summary = line.partition(" ")
            commits.append(Commit(identifier=identifier, summary=summary))
        return commits

    def show_file(self, revision: str, path: str) -> Optional[str]:
        """Return the content of ``path`` as it existed at ``revision``.

        ``path`` is relative to the client's directory, which may be a
        subdirectory of the repository. Returns ``None`` when the file does
        not exist at that revision or the lookup fails for any other reason.
        """
        if not path.startswith(("./", "../")):
            path = f"./{path}"
        try:
            result = self._run(["show", f"{revision}:{path}"], check=False)
        except GitError:
            return None
        if result.returncode != 0:
            logger.debug("No %s at %s: %s", path, revision, result.stderr.strip())
            return None
        return result.stdout

    def get_branch_name(self, revision: str) -> Optional[str]:
        """Return a human-readable ref name covering ``revision``.

        Uses ``git name-rev --name-only``. Detached or pruned commits, for
        which git answers ``undefined``, and failed lookups yield ``None``.
        """
        try:
            result = self._run(["name-rev", "--name-only", revision], check=False)
        except GitError:
            return None
        name = result.stdout.strip()
        if result.returncode != 0 or not name or name == "undefined":
            logger.debug("No branch name found for commit %s", revision)
            return None
        return name
