"""Public Python API for cipherline package.

This module provides the two engine calls used by hosts, ``run`` and
``create_default_step``, plus helpers for running recipe files.
"""

from pathlib import Path
from typing import Sequence

from cipherline.core.executor import Applicable, ExecutionResult
from cipherline.core.executor import run as _run
from cipherline.models.loader import load_recipe
from cipherline.models.recipe import Recipe
from cipherline.models.registry import DEFAULT_KIND, OperationKind
from cipherline.models.registry import create_default_step as _create_default_step
from cipherline.models.step import BaseStep


def run(input_text: str, steps: Sequence[Applicable]) -> ExecutionResult:
    """Apply an ordered list of steps to a text.

    Args:
        input_text: Text fed to the first step.
        steps: Ordered steps. The sequence is copied before execution.

    Returns:
        ExecutionResult with the output of every stage and the final output.

    Example:
        >>> from cipherline import CaesarStep, ReverseStep, run
        >>> result = run("abc", [CaesarStep(id=1, shift=3), ReverseStep(id=2)])
        >>> result.stage_outputs
        ('def', 'fed')
    """
    return _run(input_text, steps)


def create_default_step(kind: OperationKind | str = DEFAULT_KIND, step_id: int = 1) -> BaseStep:
    """Create a step of ``kind`` with its documented default parameters.

    Args:
        kind: Operation kind, e.g. ``"vigenere"`` or ``OperationKind.VIGENERE``.
        step_id: Identifier supplied by the owner of the pipeline.

    Raises:
        StepError: If the kind is unknown.

    Example:
        >>> create_default_step("rail-fence", step_id=4).rails
        3
    """
    return _create_default_step(kind, step_id)


def from_yaml(path: str | Path) -> Recipe:
    """Load a recipe from a YAML file.

    Raises:
        RecipeError: If file not found, invalid YAML or validation fails
    """
    return load_recipe(path)


def run_recipe(recipe: Recipe, input_text: str | None = None) -> ExecutionResult:
    """Run a recipe's steps over ``input_text`` or the recipe's own input."""
    text = recipe.input_text if input_text is None else input_text
    return recipe.to_pipeline().run(text)


def run_recipe_from_yaml(path: str | Path, input_text: str | None = None) -> ExecutionResult:
    """Load and run a recipe file.

    Convenience function that combines `from_yaml()` and `run_recipe()`.
    """
    return run_recipe(from_yaml(path), input_text)
