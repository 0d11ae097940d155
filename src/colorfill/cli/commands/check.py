"""Check command implementation."""

import sys
from pathlib import Path

import click

from colorfill.document import DocumentPersistence
from colorfill.exceptions import collect_errors


@click.command(name="check")
@click.argument("files", nargs=-1, required=True, type=click.Path(path_type=Path))
def check(files: tuple[Path, ...]):
    """Validate the color value of every FILE and report all failures."""
    collector = collect_errors("check documents")

    for path in files:
        with collector.try_operation(str(path)):
            document = DocumentPersistence.load(path)
            click.echo(f"OK    {path} ({document.color.kind})")

    if collector.has_errors:
        for sub_op, _ in collector.errors:
            click.echo(f"FAIL  {sub_op}")
        click.echo(f"\n{collector.get_summary()}", err=True)
        sys.exit(1)

    click.echo(f"\n{collector.get_summary()}")
