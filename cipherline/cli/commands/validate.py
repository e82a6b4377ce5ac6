"""CLI command for validating recipes."""

import sys

import click

from cipherline.core.exceptions import RecipeError
from cipherline.models.loader import load_recipe


@click.command()
@click.argument("recipe_path", type=click.Path(exists=True, dir_okay=False))
def validate(recipe_path: str):
    """Validate a recipe YAML file.

    Checks:
    - YAML syntax
    - Recipe schema validation
    - Step kinds and parameters

    Examples:

        cipherline validate recipe.yaml
    """
    try:
        recipe = load_recipe(recipe_path)
    except RecipeError as e:
        click.echo(f"✗ Recipe validation failed: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"✗ Unexpected error: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Recipe '{recipe.name}' is valid")
    click.echo(f"  Steps: {len(recipe.steps)}")
    for step in recipe.steps:
        click.echo(f"    - {step.id}: {step.kind}")
    if recipe.input_text:
        click.echo(f"  Default input: {len(recipe.input_text)} characters")
