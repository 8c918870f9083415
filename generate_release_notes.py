#!/usr/bin/env python
"""
Thin wrapper script to invoke the md_release_notes CLI.

Running ``python generate_release_notes.py`` is equivalent to running the
``generate-markdown-release-notes`` console script installed via
``pyproject.toml``.
"""

from md_release_notes.cli import PROG_NAME, main


if __name__ == "__main__":
    main(prog_name=PROG_NAME)
