"""
Group annotated commits by semantic version.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

import semver

from md_release_notes.grouping.group_model import AnnotatedCommit, VersionGroups


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


def is_valid_version(version: str) -> bool:
    """Return True if ``version`` follows the full semver grammar."""
    if not isinstance(version, str):
        return False
    return semver.Version.is_valid(version)


def group_by_version(commits: Iterable[AnnotatedCommit]) -> VersionGroups:
    """Group ``commits`` by their exact version string.

    Commits whose version is not valid semver (including the ``"NA"``
    sentinel) are left out, with one warning per commit. Within a group
    the input order is preserved.
    """
    groups: VersionGroups = {}
    for commit in commits:
        if not is_valid_version(commit.version):
            logger.warning(
                "Invalid version %s for commit: %s (%s)",
                commit.version,
                commit.summary,
                commit.identifier,
            )
            continue
        groups.setdefault(commit.version, []).append(commit)
    return groups


def sort_versions(versions: Iterable[str]) -> List[str]:
    """Sort valid semver strings by descending precedence.

    Build metadata does not take part in the comparison; versions that
    only differ in build metadata keep their relative order.
    """
    return sorted(versions, key=semver.Version.parse, reverse=True)
