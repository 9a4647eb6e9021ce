# ABOUTME: The `librarie cover` command for locating and saving a book's cover image.
# ABOUTME: Uses the full cover fallback chain, or only the first-page heuristic on request.

from pathlib import Path

import click
from rich.console import Console

from librarie.cli.options import library_option, load_or_exit, stored_option
from librarie.formats.epub import (
    EpubError,
    find_cover_image_zip_path,
    find_first_page_image_zip_path,
    guess_content_type,
    read_entry_bytes,
)

console = Console()


@click.command()
@click.argument("path")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the cover image to this file.",
)
@click.option(
    "--first-page",
    is_flag=True,
    default=False,
    help="Only look for an image on the first pages.",
)
@stored_option
@library_option
def cover(
    path: str,
    output: Path | None,
    first_page: bool,
    stored: bool,
    library_root: Path | None,
) -> None:
    """Show where the cover image of an EPUB lives, optionally saving it."""
    info = load_or_exit(console, path, stored=stored, library_root=library_root)
    if first_page:
        zip_path = find_first_page_image_zip_path(info)
    else:
        zip_path = find_cover_image_zip_path(info)

    if zip_path is None:
        console.print("[yellow]No cover found.[/yellow]")
        return

    console.print(f"{zip_path} ({guess_content_type(zip_path)})")
    if output is None:
        return

    try:
        data = read_entry_bytes(info, zip_path)
    except EpubError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc
    output.write_bytes(data)
    console.print(f"[green]Wrote {len(data)} bytes to {output}[/green]")
