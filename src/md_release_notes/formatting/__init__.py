"""
Output formatting for release notes.
"""

from .markdown import format_markdown  # noqa: F401
