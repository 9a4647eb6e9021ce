# ABOUTME: The `librarie toc` command for listing table-of-contents targets.
# ABOUTME: Prints nav (EPUB3) or NCX (EPUB2) links as archive paths in reading order.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from librarie.cli.options import library_option, load_or_exit, stored_option
from librarie.formats.epub import extract_toc_links

console = Console()


@click.command()
@click.argument("path")
@stored_option
@library_option
def toc(path: str, stored: bool, library_root: Path | None) -> None:
    """List the table of contents of an EPUB file."""
    info = load_or_exit(console, path, stored=stored, library_root=library_root)
    links = extract_toc_links(info)

    if not links:
        console.print("[yellow]No table of contents found.[/yellow]")
        return

    table = Table(title=f"Contents of {info.title or info.archive_path.name}")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Path", style="bold")
    table.add_column("Fragment")

    for number, link in enumerate(links, start=1):
        table.add_row(str(number), link.path, link.fragment or "")

    console.print(table)
    console.print(f"\n{len(links)} link(s).")
