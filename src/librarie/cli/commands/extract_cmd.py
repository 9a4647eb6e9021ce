# ABOUTME: The `librarie extract` command for copying a single entry out of an EPUB.
# ABOUTME: Streams the entry to a file or stdout without loading it into memory.

import shutil
from pathlib import Path

import click
from rich.console import Console

from librarie.cli.options import library_option, load_or_exit, stored_option
from librarie.formats.epub import EpubError, open_entry_stream

console = Console(stderr=True)


@click.command()
@click.argument("path")
@click.argument("entry")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the entry to this file instead of stdout.",
)
@stored_option
@library_option
def extract(
    path: str,
    entry: str,
    output: Path | None,
    stored: bool,
    library_root: Path | None,
) -> None:
    """Copy ENTRY (an archive-internal path) out of an EPUB file."""
    info = load_or_exit(console, path, stored=stored, library_root=library_root)
    target = "-" if output is None else str(output)
    try:
        with open_entry_stream(info, entry) as stream, click.open_file(target, "wb") as f:
            shutil.copyfileobj(stream, f)
    except EpubError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc
    if output is not None:
        console.print(f"[green]Wrote {entry} to {output}[/green]")
