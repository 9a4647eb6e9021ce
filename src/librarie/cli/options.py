# ABOUTME: Shared Click options and publication loading for Librarie CLI commands.
# ABOUTME: Lets every command read either a plain file path or a stored path in the library.

from pathlib import Path

import click
from rich.console import Console

from librarie.core.library import DEFAULT_LIBRARY_ROOT, resolve_library_path
from librarie.formats.epub import EpubError, PublicationInfo, load_publication

library_option = click.option(
    "--library",
    "library_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    envvar="LIBRARIE_LIBRARY",
    help=f"Library root used with --stored (default: {DEFAULT_LIBRARY_ROOT})",
)

stored_option = click.option(
    "--stored",
    is_flag=True,
    default=False,
    help="Treat PATH as a stored path relative to the library root.",
)


def load_or_exit(
    console: Console, path: str, *, stored: bool, library_root: Path | None
) -> PublicationInfo:
    """Open the publication for a command, exiting with status 1 on failure."""
    if stored:
        resolved = resolve_library_path(library_root or DEFAULT_LIBRARY_ROOT, path)
        if resolved is None:
            console.print(f"[red]Error:[/red] {path} is not available in the library.")
            raise SystemExit(1)
    else:
        resolved = Path(path)

    try:
        return load_publication(resolved)
    except EpubError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc
