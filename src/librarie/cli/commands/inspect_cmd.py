# ABOUTME: The `librarie inspect` command for viewing EPUB structure and metadata.
# ABOUTME: Shows package document details, Dublin Core fields, and the resolved cover.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from librarie.cli.options import library_option, load_or_exit, stored_option
from librarie.formats.epub import extract_core_metadata, find_cover_image_zip_path

console = Console()


@click.command()
@click.argument("path")
@stored_option
@library_option
def inspect(path: str, stored: bool, library_root: Path | None) -> None:
    """Show structure and metadata extracted from an EPUB file."""
    info = load_or_exit(console, path, stored=stored, library_root=library_root)
    meta = extract_core_metadata(info)
    cover = find_cover_image_zip_path(info)

    table = Table(title=info.archive_path.name, show_header=False, pad_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Title", info.title or "[dim]unknown[/dim]")
    table.add_row("Language", info.language or "[dim]unknown[/dim]")
    if meta is not None:
        table.add_row("Author", meta.author or "[dim]unknown[/dim]")
        table.add_row("Publisher", meta.publisher or "[dim]unknown[/dim]")
        table.add_row("Identifier", meta.identifier or "[dim]none[/dim]")
        table.add_row("ISBN", meta.isbn or "[dim]none[/dim]")
        table.add_row("Date", meta.date or "[dim]none[/dim]")
        if meta.subjects:
            table.add_row("Subjects", ", ".join(meta.subjects))
        if meta.description:
            table.add_row("Description", meta.description)
    table.add_row("Package", info.package_document_path)
    table.add_row("Spine", f"{len(info.spine_hrefs)} item(s)")
    table.add_row("Manifest", f"{len(info.manifest_id_to_href)} item(s)")
    table.add_row("Cover", cover or "[dim]none[/dim]")

    console.print(table)
