"""
Command line interface for the md_release_notes tool.

This module defines the ``main`` function which is used as the entry
point when executing the ``generate-markdown-release-notes`` command. It
locates the repository, loads the configuration, runs the release notes
pipeline and prints the Markdown document to standard output. It is the
only place that turns failures into process exit codes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

import click

from md_release_notes import __version__
from md_release_notes.config.loader import ConfigError, load_config
from md_release_notes.generator import ReleaseNotesGenerator
from md_release_notes.metadata.version_resolver import VERSION_SOURCES, create_resolver
from md_release_notes.vcs.git_client import GitClient, GitError

# Create a module-level logger. Records reach the root handlers installed
# by ``main`` through propagation.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


PROG_NAME = "generate-markdown-release-notes"

ERROR_MSG = (
    "Missing command line arguments: "
    f"{PROG_NAME} [branch name from] [branch name to]"
)

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
EXIT_INVALID_USAGE = 2
EXIT_NO_REPO = 3
EXIT_CONFIG_ERROR = 4
EXIT_VCS_FAILURE = 5


def print_error(message: str, indent: int = 0):
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)


def parse_positionals(args: Tuple[str, ...]) -> Tuple[Path, str, str]:
    """Split the positional arguments into (directory, branch_a, branch_b).

    Accepts either ``BRANCH_A BRANCH_B`` or the legacy
    ``DIRECTORY BRANCH_A BRANCH_B``. Without a directory the current
    working directory is used.

    Raises
    ------
    click.UsageError
        If the number of arguments is neither two nor three.
    """
    if len(args) == 2:
        return Path.cwd(), args[0], args[1]
    if len(args) == 3:
        return Path(args[0]), args[1], args[2]
    raise click.UsageError(ERROR_MSG)


@click.command(name=PROG_NAME)
@click.argument("args", nargs=-1, metavar="[DIRECTORY] BRANCH_A BRANCH_B")
@click.option(
    "--version-source",
    type=click.Choice(VERSION_SOURCES),
    help="Where commit versions come from (overrides the config file).",
)
@click.option("--manifest", help="Manifest path read from each commit by the snapshot source.")
@click.option("--no-tickets", "no_tickets", is_flag=True, help="Do not annotate commits with ticket identifiers.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file (default: .release_notes_config.json in the repository directory).",
)
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name=PROG_NAME)
def main(
    args: Tuple[str, ...],
    version_source: Optional[str],
    manifest: Optional[str],
    no_tickets: bool,
    config_path: Optional[Path],
    verbose: bool,
) -> None:
    """Generate release notes MARKDOWN by diffing the history of two branches.

    Commits reachable from BRANCH_B but not from BRANCH_A are grouped by
    project version, newest version first.
    """
    # Configure logging. Use force=True to ensure handlers are reconfigured
    # on subsequent invocations (important for tests).
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )

    directory, branch_a, branch_b = parse_positionals(args)

    # Get Click context for proper exit handling
    ctx = click.get_current_context(silent=True)

    try:
        directory = directory.resolve()
        if not directory.is_dir():
            print_error(f"Directory does not exist: {directory}")
            raise click.exceptions.Exit(EXIT_NO_REPO)
        if GitClient.find_repo_root(directory) is None:
            print_error(f"Not inside a Git repository: {directory}")
            raise click.exceptions.Exit(EXIT_NO_REPO)

        try:
            config = load_config(directory, config_path)
        except ConfigError as exc:
            print_error(f"Configuration error: {exc}")
            raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

        if version_source is not None:
            config["version_source"] = version_source
        if manifest is not None:
            config["manifest"] = manifest
        if no_tickets:
            config["tickets"] = False
        logger.debug("Effective configuration: %s", config)

        client = GitClient(directory)
        resolver = create_resolver(
            config["version_source"],
            directory,
            client,
            manifest=config["manifest"],
        )
        generator = ReleaseNotesGenerator(
            client,
            resolver,
            include_tickets=config["tickets"],
            ticket_pattern=config["ticket_pattern"],
        )

        try:
            notes = generator.generate(branch_a, branch_b)
        except GitError as exc:
            print_error(f"Git command failed: {exc.command_line}")
            if str(exc):
                # stdout stays empty on failure
                print_error(str(exc), indent=1)
            raise click.exceptions.Exit(EXIT_VCS_FAILURE)

        click.echo(f"# Release notes for: {branch_a} <--> {branch_b}")
        click.echo(notes)

    except click.exceptions.Exit:
        # Click uses its own Exit exception; re-raise to let Click handle it
        raise
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        ctx.exit(EXIT_GENERIC_ERROR)
