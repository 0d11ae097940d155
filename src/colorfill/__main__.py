"""Main entry point for colorfill."""

from colorfill.cli.main import cli

if __name__ == "__main__":
    cli()
