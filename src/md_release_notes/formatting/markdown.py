"""
Markdown rendering of version groups.

Each group becomes a section::

    ## Version 2.0.0
    - Fix bug [ABC-1]
    - Add feature

Sections are ordered newest version first and separated by a blank line.
"""

from __future__ import annotations

from typing import List

from md_release_notes.grouping.group_model import AnnotatedCommit, VersionGroups
from md_release_notes.grouping.version_grouper import sort_versions


def format_commit(commit: AnnotatedCommit) -> str:
    line = f"- {commit.summary}"
    if commit.tickets:
        line += f" [{', '.join(commit.tickets)}]"
    return line


def format_section(version: str, commits: List[AnnotatedCommit]) -> str:
    lines = [f"## Version {version}"]
    lines.extend(format_commit(commit) for commit in commits)
    return "\n".join(lines)


def format_markdown(groups: VersionGroups) -> str:
    """Render ``groups`` as a Markdown document.

    Returns an empty string when there are no groups.
    """
    return "\n\n".join(
        format_section(version, groups[version]) for version in sort_versions(groups)
    )
