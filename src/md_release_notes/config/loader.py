"""
Configuration loader for md_release_notes.

The tool reads an optional JSON configuration file named
``.release_notes_config.json`` from the target repository directory, or
from an explicit path given on the command line. The loader validates the
structure of the configuration and returns a dictionary with every
setting filled in, using defaults for absent keys.

A missing default file is not an error. A missing explicit file, a
malformed file, or a file with fields of the wrong type raises
:class:`ConfigError`.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional

from md_release_notes.grouping.ticket_extractor import TICKET_PATTERN
from md_release_notes.metadata.manifest import NODE_MANIFEST
from md_release_notes.metadata.version_resolver import (
    VERSION_SOURCE_WORKING_TREE,
    VERSION_SOURCES,
)


logger = logging.getLogger(__name__)
# Attach a null handler to avoid "No handler" warnings when the library is
# used without logging configured. The CLI configures the root logger.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


CONFIG_FILENAME = ".release_notes_config.json"

DEFAULT_CONFIG: Dict[str, Any] = {
    "version_source": VERSION_SOURCE_WORKING_TREE,
    "manifest": NODE_MANIFEST,
    "tickets": True,
    "ticket_pattern": TICKET_PATTERN.pattern,
}


class ConfigError(Exception):
    """Raised when the configuration file is missing or invalid."""

    pass


def _validate(data: Dict[str, Any]) -> None:
    if "version_source" in data and data["version_source"] not in VERSION_SOURCES:
        raise ConfigError(
            f"'version_source' must be one of: {', '.join(VERSION_SOURCES)}"
        )
    if "manifest" in data and (not isinstance(data["manifest"], str) or not data["manifest"]):
        raise ConfigError("'manifest' must be a non-empty string")
    if "tickets" in data and not isinstance(data["tickets"], bool):
        raise ConfigError("'tickets' must be a boolean")
    if "ticket_pattern" in data:
        if not isinstance(data["ticket_pattern"], str):
            raise ConfigError("'ticket_pattern' must be a string")
        try:
            re.compile(data["ticket_pattern"])
        except re.error as exc:
            raise ConfigError(f"'ticket_pattern' is not a valid regular expression: {exc}") from exc


def load_config(directory: Path, config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the release notes configuration and return it.

    Args:
        directory: The repository directory searched for
                   ``.release_notes_config.json`` when ``config_path`` is
                   not given.
        config_path: Explicit configuration file. It must exist.

    Returns:
        A dictionary with the keys:
        - version_source (str): ``"working-tree"`` or ``"snapshot"``
        - manifest (str): Manifest path read by the snapshot policy
        - tickets (bool): Whether ticket identifiers are extracted
        - ticket_pattern (str): Regular expression for ticket identifiers

    Raises:
        ConfigError: If the configuration file is malformed or invalid, or
                     if an explicit ``config_path`` does not exist.
    """
    config = dict(DEFAULT_CONFIG)

    if config_path is None:
        path = directory / CONFIG_FILENAME
        if not path.exists():
            logger.debug("No configuration file at %s; using defaults", path)
            return config
    else:
        path = config_path
        if not path.exists():
            logger.error("Configuration file '%s' does not exist", path)
            raise ConfigError(f"Missing configuration file: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid JSON in {path.name}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain a JSON object")

    unknown = sorted(set(data) - set(DEFAULT_CONFIG))
    if unknown:
        logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

    _validate(data)
    config.update({key: data[key] for key in DEFAULT_CONFIG if key in data})

    logger.debug("Loaded configuration from: %s", path)
    logger.debug("Configuration data: %s", config)
    return config
