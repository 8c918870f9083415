"""
Project metadata discovery and version resolution.

See :mod:`md_release_notes.metadata.manifest` for the manifest readers and
:mod:`md_release_notes.metadata.version_resolver` for the resolution
policies.
"""

from .manifest import ProjectMetadata, discover_project_metadata  # noqa: F401
from .version_resolver import (  # noqa: F401
    NA_VERSION,
    SnapshotVersionResolver,
    VersionResolver,
    WorkingTreeVersionResolver,
    create_resolver,
)
