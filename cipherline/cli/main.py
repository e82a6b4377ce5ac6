"""Main CLI entry point for cipherline."""

import click

from cipherline import __version__
from cipherline.cli.commands.list import list_operations
from cipherline.cli.commands.run import run
from cipherline.cli.commands.stages import stages
from cipherline.cli.commands.validate import validate


@click.group()
@click.version_option(version=__version__)
def main():
    """Cipherline - composable text transformation pipelines."""
    pass


# Register commands
main.add_command(run)
main.add_command(stages)
main.add_command(validate)
main.add_command(list_operations)


if __name__ == "__main__":
    main()
