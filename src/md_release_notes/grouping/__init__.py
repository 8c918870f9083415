"""
Grouping logic for release notes.

This package extracts ticket identifiers from commits and groups the
annotated commits by semantic version. See
:mod:`md_release_notes.grouping.ticket_extractor` and
:mod:`md_release_notes.grouping.version_grouper` for details.
"""

from .group_model import AnnotatedCommit  # noqa: F401
from .ticket_extractor import TICKET_PATTERN, extract_tickets  # noqa: F401
from .version_grouper import group_by_version, sort_versions  # noqa: F401
