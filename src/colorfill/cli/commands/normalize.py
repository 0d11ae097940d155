"""Normalize command implementation."""

import logging
from pathlib import Path

import click

from colorfill.document import DocumentPersistence
from colorfill.exceptions import ColorFillError, ErrorContext

from ..output import fail, read_source

logger = logging.getLogger(__name__)


@click.command(name="normalize")
@click.argument("file", type=click.Path(allow_dash=True, path_type=Path))
@click.option("--in-place", "-i", is_flag=True, help="Rewrite FILE instead of printing")
@click.option(
    "--indent",
    type=click.IntRange(0, 8),
    default=None,
    help="JSON indentation (default: from config)",
)
@click.option(
    "--backup/--no-backup",
    default=None,
    help="Keep a .bak copy when rewriting in place (default: from config)",
)
@click.pass_obj
def normalize(config, file: Path, in_place: bool, indent: int | None, backup: bool | None):
    """
    Rewrite the document in FILE with canonical colors.

    Hex colors are expanded to lowercase 6-digit form ("#F00" becomes
    "#ff0000"). Use '-' to read from stdin.
    """
    if in_place and str(file) == "-":
        raise click.UsageError("--in-place cannot be used with stdin")

    indent = config.indent if indent is None else indent
    backup = config.backup if backup is None else backup

    try:
        with ErrorContext(f"normalize {file}", logger_instance=logger):
            text, source = read_source(file)
            document = DocumentPersistence.loads(text, source=source)
            if in_place:
                DocumentPersistence.save(document, file, indent=indent, backup=backup)
    except (ColorFillError, OSError) as e:
        fail(e)
        return

    if in_place:
        click.echo(f"Normalized {file}")
    else:
        click.echo(DocumentPersistence.dumps(document, indent=indent))
