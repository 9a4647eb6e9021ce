# ABOUTME: CLI package for Librarie, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from librarie.cli.commands import (
    cover_cmd,
    extract_cmd,
    inspect_cmd,
    manifest_cmd,
    toc_cmd,
)


@click.group()
@click.version_option(package_name="librarie")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log EPUB engine diagnostics to stderr.",
)
def cli(verbose: bool) -> None:
    """Librarie - look inside EPUB files the way the catalog does."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


cli.add_command(inspect_cmd.inspect)
cli.add_command(toc_cmd.toc)
cli.add_command(cover_cmd.cover)
cli.add_command(extract_cmd.extract)
cli.add_command(manifest_cmd.manifest)
