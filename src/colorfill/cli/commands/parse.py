"""Parse command implementation."""

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from colorfill.document import DocumentPersistence
from colorfill.exceptions import ColorFillError, wrap_pydantic_error
from colorfill.models import ColorValueAdapter

from ..output import describe_color_value, fail, read_source

logger = logging.getLogger(__name__)


@click.command(name="parse")
@click.argument("file", type=click.Path(allow_dash=True, path_type=Path))
@click.option(
    "--raw",
    is_flag=True,
    help='Treat the whole input as a bare color value instead of a {"color": ...} document',
)
def parse(file: Path, raw: bool):
    """
    Decode the color value in FILE and print its components.

    Use '-' to read from stdin.
    """
    try:
        text, source = read_source(file)
        if raw:
            try:
                value = ColorValueAdapter.validate_json(text)
            except ValidationError as e:
                raise wrap_pydantic_error(e, source) from e
        else:
            value = DocumentPersistence.loads(text, source=source).color
    except (ColorFillError, OSError) as e:
        fail(e)
        return

    logger.info(f"Parsed {value.kind} color value from {source}")
    for line in describe_color_value(value):
        click.echo(line)
