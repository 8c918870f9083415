"""
Project manifest readers.

A manifest is a project metadata file declaring at least a ``name`` and a
``version``: ``package.json`` for Node projects and ``pubspec.yaml`` for
Flutter projects. Every reader here maps its input to a parsed mapping or
to ``None``; malformed or missing manifests never raise.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import yaml


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


NODE_MANIFEST = "package.json"
FLUTTER_MANIFEST = "pubspec.yaml"

# Checked in order when discovering metadata in a working tree.
DEFAULT_MANIFESTS = (NODE_MANIFEST, FLUTTER_MANIFEST)

YAML_SUFFIXES = {".yaml", ".yml"}


@dataclass(frozen=True)
class ProjectMetadata:
    """Name and version declared by a project manifest."""

    name: str
    version: str


def _as_mapping(document: Any) -> Optional[Dict[str, Any]]:
    if isinstance(document, dict):
        return document
    return None


def parse_json_manifest(text: str) -> Optional[Dict[str, Any]]:
    try:
        return _as_mapping(json.loads(text))
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("Malformed JSON manifest: %s", exc)
        return None


def parse_yaml_manifest(text: str) -> Optional[Dict[str, Any]]:
    try:
        return _as_mapping(yaml.safe_load(text))
    except (yaml.YAMLError, RecursionError) as exc:
        logger.debug("Malformed YAML manifest: %s", exc)
        return None


def parse_manifest(text: str, filename: str) -> Optional[Dict[str, Any]]:
    """Parse manifest ``text``, choosing YAML or JSON from ``filename``'s suffix."""
    if Path(filename).suffix.lower() in YAML_SUFFIXES:
        return parse_yaml_manifest(text)
    return parse_json_manifest(text)


def _read_text(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read manifest %s: %s", path, exc)
        return None


def read_json_manifest(path: Path) -> Optional[Dict[str, Any]]:
    """Read and parse a JSON manifest, returning ``None`` on any error."""
    text = _read_text(path)
    return None if text is None else parse_json_manifest(text)


def read_yaml_manifest(path: Path) -> Optional[Dict[str, Any]]:
    """Read and parse a YAML manifest, returning ``None`` on any error."""
    text = _read_text(path)
    return None if text is None else parse_yaml_manifest(text)


def read_manifest(path: Path) -> Optional[Dict[str, Any]]:
    if path.suffix.lower() in YAML_SUFFIXES:
        return read_yaml_manifest(path)
    return read_json_manifest(path)


def metadata_from_manifest(document: Optional[Dict[str, Any]]) -> Optional[ProjectMetadata]:
    """Build :class:`ProjectMetadata` when ``document`` has both a name and a version."""
    if not document:
        return None
    name = document.get("name")
    version = document.get("version")
    if not name or version is None or version == "":
        return None
    return ProjectMetadata(name=str(name), version=str(version))


def discover_project_metadata(
    directory: Path,
    manifests: Sequence[str] = DEFAULT_MANIFESTS,
) -> Optional[ProjectMetadata]:
    """Discover the project metadata in ``directory``.

    Each manifest in ``manifests`` is tried in order; the first that
    supplies both ``name`` and ``version`` wins.

    Parameters
    ----------
    directory : Path
        The project's working tree.
    manifests : Sequence[str]
        Manifest file names relative to ``directory``.

    Returns
    -------
    Optional[ProjectMetadata]
        The discovered metadata or ``None`` if no manifest qualifies.
    """
    for manifest in manifests:
        metadata = metadata_from_manifest(read_manifest(directory / manifest))
        if metadata is not None:
            logger.debug("Using %s from %s", metadata, manifest)
            return metadata
    return None
