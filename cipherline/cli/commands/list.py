"""CLI command for listing available operations."""

import click

from cipherline.models.registry import create_default_step, list_operation_kinds


@click.command("list-operations")
def list_operations():
    """List available operations and their default parameters."""
    click.echo("Available Operations:")
    for kind in list_operation_kinds():
        params = create_default_step(kind).params()
        defaults = ", ".join(f"{k}={v}" for k, v in params.items())
        click.echo(f"  - {kind}" + (f" ({defaults})" if defaults else ""))
