"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from colorfill import __version__
from colorfill.config import AppConfig
from colorfill.exceptions import ColorFillError

from .commands import check, normalize, parse
from .output import fail

logger = logging.getLogger(__name__)

HANDLER_NAME = "colorfill-cli"


def setup_logging(verbose: int, log_file: Optional[Path]) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        log_file: Optional log file path; rotated at 10MB, 5 backups kept
    """
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = []
    if verbose > 0:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,
                backupCount=5
            )
        )

    for handler in handlers:
        handler.set_name(HANDLER_NAME)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    root_logger.setLevel(level)
    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.version_option(version=__version__, prog_name="colorfill")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Also write logs to this file'
)
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.colorfill/config.json)'
)
@click.pass_context
def cli(ctx, verbose: int, log_file: Optional[Path], config_path: Optional[Path]):
    """
    colorfill - decode and normalize JSON color values.

    A color value is one of:

    \b
      "rainbow"                  the rainbow keyword
      "#ff0000" or "#f00"        a single hex color
      ["#ff0000", "#00f", ...]   an array of hex colors

    \b
    Examples:
      # Show the decoded colors of a document
      colorfill parse fill.json

      # Decode a bare value from stdin
      echo '["#fff", "#00ff00"]' | colorfill parse --raw -

      # Rewrite a document with canonical 6-digit colors
      colorfill normalize --in-place fill.json

      # Validate many documents at once
      colorfill check *.json
    """
    setup_logging(verbose, log_file)

    try:
        ctx.obj = AppConfig.load_or_default(config_path)
    except ColorFillError as e:
        fail(e)


cli.add_command(parse)
cli.add_command(normalize)
cli.add_command(check)

if __name__ == "__main__":
    cli()
