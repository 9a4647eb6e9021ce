# ABOUTME: The `librarie manifest` command for emitting a Readium web publication manifest.
# ABOUTME: Prints JSON whose resource links live under a configurable base URL.

import json
from pathlib import Path

import click
from rich.console import Console

from librarie.cli.options import library_option, load_or_exit, stored_option
from librarie.formats.epub import build_webpub_manifest

console = Console(stderr=True)


@click.command()
@click.argument("path")
@click.option(
    "--base",
    "base_url",
    default="",
    help="URL the manifest is served from; resources live under BASE/resources.",
)
@stored_option
@library_option
def manifest(
    path: str,
    base_url: str,
    stored: bool,
    library_root: Path | None,
) -> None:
    """Print a Readium Web Publication Manifest for an EPUB file."""
    info = load_or_exit(console, path, stored=stored, library_root=library_root)
    base = base_url.rstrip("/")
    prefix = f"{base}/" if base else ""

    document = build_webpub_manifest(
        info,
        self_href=f"{prefix}manifest.json",
        resources_base=f"{prefix}resources",
    )
    click.echo(json.dumps(document, indent=2, ensure_ascii=False))
