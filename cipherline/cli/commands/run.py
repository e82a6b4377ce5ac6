"""CLI command for running recipes."""

import sys

import click

from cipherline import run_recipe
from cipherline.cli.commands._input import resolve_input
from cipherline.core.exceptions import CipherlineError
from cipherline.core.logging import configure_logging
from cipherline.models.loader import load_recipe


@click.command()
@click.argument("recipe_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--input", "input_text", help="Input text (default: the recipe's input)")
@click.option(
    "--input-file",
    type=click.Path(exists=True, allow_dash=True),
    help="Read input text from a file ('-' for stdin)",
)
@click.option("--stages", "show_stages", is_flag=True, help="Print the output of every stage")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Log level (default: WARNING)",
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="Use JSON format for logs",
)
def run(
    recipe_path: str,
    input_text: str | None,
    input_file: str | None,
    show_stages: bool,
    log_level: str,
    json_logs: bool,
):
    """Run a recipe and print the final output.

    Examples:

        cipherline run recipe.yaml
        cipherline run recipe.yaml --input "Hello World"
        cipherline run recipe.yaml --input-file message.txt --stages
        echo "attack at dawn" | cipherline run recipe.yaml --input-file -
    """
    try:
        recipe = load_recipe(recipe_path)
        configure_logging(level=log_level, json_format=json_logs, recipe_name=recipe.name)

        text = resolve_input(input_text, input_file)
        result = run_recipe(recipe, text)

        if show_stages:
            for index, (step, output) in enumerate(result.stages(), start=1):
                click.echo(f"[{index}] {step.kind}: {output}")
            click.echo("")
        click.echo(result.final_output)

    except CipherlineError as e:
        click.echo(f"Recipe error: {e}", err=True)
        sys.exit(1)
