"""
Version resolution policies.

A resolver maps a commit to the project version shown on its release
notes entry. Exactly one policy is active per run:

``working-tree``
    Ignore the commit and read the current working tree's manifest. The
    answer is the same for every commit, so it is resolved once.
``snapshot``
    Read the manifest as it existed in each commit.

Resolvers never raise; anything unresolvable becomes :data:`NA_VERSION`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from md_release_notes.metadata.manifest import (
    DEFAULT_MANIFESTS,
    NODE_MANIFEST,
    ProjectMetadata,
    discover_project_metadata,
    parse_manifest,
)
from md_release_notes.vcs.git_client import Commit, GitClient


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


NA_VERSION = "NA"

VERSION_SOURCE_WORKING_TREE = "working-tree"
VERSION_SOURCE_SNAPSHOT = "snapshot"
VERSION_SOURCES = (VERSION_SOURCE_WORKING_TREE, VERSION_SOURCE_SNAPSHOT)


class VersionResolver:
    """Base class for version resolution policies."""

    def resolve(self, commit: Commit) -> str:
        raise NotImplementedError


class WorkingTreeVersionResolver(VersionResolver):
    """Resolve every commit to the version declared in the working tree."""

    def __init__(self, directory: Path, manifests: Sequence[str] = DEFAULT_MANIFESTS) -> None:
        self.directory = directory
        self.manifests = tuple(manifests)
        self._resolved = False
        self._version = NA_VERSION

    def _discover(self) -> Optional[ProjectMetadata]:
        try:
            return discover_project_metadata(self.directory, self.manifests)
        except Exception as exc:  # never let a manifest abort the run
            logger.debug("Metadata discovery failed: %s", exc)
            return None

    def resolve(self, commit: Commit) -> str:
        if not self._resolved:
            metadata = self._discover()
            if metadata is None:
                logger.warning(
                    "No project metadata found in %s (looked for %s)",
                    self.directory,
                    ", ".join(self.manifests),
                )
            else:
                self._version = metadata.version
            self._resolved = True
        return self._version


class SnapshotVersionResolver(VersionResolver):
    """Resolve each commit to the version in its own manifest snapshot."""

    def __init__(self, client: GitClient, manifest: str = NODE_MANIFEST) -> None:
        self.client = client
        self.manifest = manifest

    def _read_version(self, commit: Commit) -> Optional[str]:
        content = self.client.show_file(commit.identifier, self.manifest)
        if content is None:
            return None
        document = parse_manifest(content, self.manifest)
        if not document:
            return None
        version = document.get("version")
        if version is None or version == "":
            return None
        return str(version)

    def resolve(self, commit: Commit) -> str:
        try:
            version = self._read_version(commit)
        except Exception as exc:  # never let a manifest abort the run
            logger.debug("Cannot read %s at %s: %s", self.manifest, commit.identifier, exc)
            return NA_VERSION
        return NA_VERSION if version is None else version


def create_resolver(
    version_source: str,
    directory: Path,
    client: GitClient,
    manifest: str = NODE_MANIFEST,
) -> VersionResolver:
    """Create the resolver for the configured ``version_source``.

    Raises
    ------
    ValueError
        If ``version_source`` is not one of :data:`VERSION_SOURCES`.
    """
    if version_source == VERSION_SOURCE_WORKING_TREE:
        return WorkingTreeVersionResolver(directory)
    if version_source == VERSION_SOURCE_SNAPSHOT:
        return SnapshotVersionResolver(client, manifest)
    raise ValueError(f"Unknown version source: {version_source!r}")
