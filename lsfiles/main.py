# lsfiles/main.py
"""Main entry point for the lsfiles CLI application."""

from lsfiles.cli.interface import main_cli


def entrypoint():
    """Function to be called by the script defined in pyproject.toml."""
    main_cli(prog_name="lsfiles")

if __name__ == '__main__':
    entrypoint()
