"""
Version lookup for md_release_notes.

The tool reports the version recorded in its installed distribution
metadata, which is generated from ``pyproject.toml`` at install time.
Running from a source checkout that was never installed yields a
development placeholder.
"""

from importlib import metadata

DISTRIBUTION_NAME = "markdown-release-notes"
FALLBACK_VERSION = "0.0.0.dev0"


def get_package_version(distribution: str = DISTRIBUTION_NAME) -> str:
    """
    Get the installed version of ``distribution``.

    Args:
        distribution: Name of the distribution on the package index.

    Returns:
        The installed version, or ``FALLBACK_VERSION`` if the distribution
        is not installed.
    """
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return FALLBACK_VERSION
