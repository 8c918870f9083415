"""
Top-level package for md_release_notes.

This package exposes the main CLI entry point via the
``md_release_notes.cli`` module and the release notes pipeline via
``md_release_notes.generator``.
"""

from md_release_notes._version import get_package_version

__all__ = ["__version__"]

__version__ = get_package_version()
