"""
Data models for version grouping.

An :class:`AnnotatedCommit` is a commit enriched with the project version
it belongs to and the tickets it references. Groups of annotated commits
are keyed by their exact version string.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from md_release_notes.vcs.git_client import Commit


@dataclass(frozen=True)
class AnnotatedCommit:
    """Representation of a commit ready for release notes.

    Attributes
    ----------
    commit : Commit
        The underlying commit.
    version : str
        The resolved project version, or the ``"NA"`` sentinel.
    tickets : Tuple[str, ...]
        Distinct ticket identifiers. Order is not meaningful.
    """

    commit: Commit
    version: str
    tickets: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def identifier(self) -> str:
        return self.commit.identifier

    @property
    def summary(self) -> str:
        return self.commit.summary


VersionGroups = Dict[str, List[AnnotatedCommit]]
