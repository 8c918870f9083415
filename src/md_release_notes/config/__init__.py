"""
Configuration loading for md_release_notes.

Provides a loader for the optional ``.release_notes_config.json`` file.
See :mod:`md_release_notes.config.loader` for implementation details.
"""

from .loader import ConfigError, load_config  # noqa: F401
