"""CLI command for inspecting every stage of a recipe."""

import sys

import click

from cipherline import run_recipe
from cipherline.cli.commands._input import resolve_input
from cipherline.core.exceptions import CipherlineError
from cipherline.models.loader import load_recipe


@click.command()
@click.argument("recipe_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--input", "input_text", help="Input text (default: the recipe's input)")
@click.option(
    "--input-file",
    type=click.Path(exists=True, allow_dash=True),
    help="Read input text from a file ('-' for stdin)",
)
def stages(recipe_path: str, input_text: str | None, input_file: str | None):
    """Show each step of a recipe with its parameters and output.

    Examples:

        cipherline stages recipe.yaml --input "attack at dawn"
    """
    try:
        recipe = load_recipe(recipe_path)
        text = resolve_input(input_text, input_file)
        result = run_recipe(recipe, text)
    except CipherlineError as e:
        click.echo(f"Recipe error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Input: {result.input_text}")
    for index, (step, output) in enumerate(result.stages(), start=1):
        params = ", ".join(f"{k}={v}" for k, v in step.params().items())
        click.echo(f"Stage {index} (id={step.id}) {step.kind}" + (f" [{params}]" if params else ""))
        click.echo(f"  {output}")
    click.echo(f"Output: {result.final_output}")
