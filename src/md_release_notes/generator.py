"""
Release notes generation pipeline.

:class:`ReleaseNotesGenerator` lists the commits between two refs,
annotates each with its resolved version and ticket identifiers, groups
them by version and renders the groups as Markdown. Only a failure to list
the commits is fatal; everything else degrades per commit.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Pattern, Union

from md_release_notes.formatting.markdown import format_markdown
from md_release_notes.grouping.group_model import AnnotatedCommit
from md_release_notes.grouping.ticket_extractor import TICKET_PATTERN, extract_tickets, merge_tickets
from md_release_notes.grouping.version_grouper import group_by_version
from md_release_notes.metadata.version_resolver import VersionResolver
from md_release_notes.vcs.git_client import Commit, GitClient


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class ReleaseNotesGenerator:
    """Generate Markdown release notes from a Git repository.

    Parameters
    ----------
    client : GitClient
        Client for the repository being described.
    resolver : VersionResolver
        The version resolution policy for this run.
    include_tickets : bool
        Whether to annotate commits with ticket identifiers.
    ticket_pattern : str or Pattern, optional
        Overrides the default ticket pattern.
    """

    def __init__(
        self,
        client: GitClient,
        resolver: VersionResolver,
        include_tickets: bool = True,
        ticket_pattern: Optional[Union[str, Pattern[str]]] = None,
    ) -> None:
        self.client = client
        self.resolver = resolver
        self.include_tickets = include_tickets
        self.ticket_pattern = ticket_pattern or TICKET_PATTERN

    def find_tickets(self, commit: Commit) -> List[str]:
        """Return the tickets named in ``commit``'s summary and branch name."""
        from_summary = extract_tickets(commit.summary, self.ticket_pattern)
        branch_name = self.client.get_branch_name(commit.identifier)
        from_branch = extract_tickets(branch_name, self.ticket_pattern) if branch_name else []
        return merge_tickets(from_summary, from_branch)

    def annotate(self, commit: Commit) -> AnnotatedCommit:
        version = self.resolver.resolve(commit)
        tickets = self.find_tickets(commit) if self.include_tickets else []
        return AnnotatedCommit(commit=commit, version=version, tickets=tuple(tickets))

    def collect(self, from_ref: str, to_ref: str) -> List[AnnotatedCommit]:
        """List and annotate the commits between ``from_ref`` and ``to_ref``.

        Raises
        ------
        GitError
            If the commit log cannot be read.
        """
        commits = self.client.log_commits(from_ref, to_ref)
        logger.debug("Found %d commit(s) between %s and %s", len(commits), from_ref, to_ref)
        return [self.annotate(commit) for commit in commits]

    def generate(self, from_ref: str, to_ref: str) -> str:
        """Return the Markdown release notes for ``from_ref..to_ref``.

        Raises
        ------
        GitError
            If the commit log cannot be read.
        """
        groups = group_by_version(self.collect(from_ref, to_ref))
        return format_markdown(groups)
