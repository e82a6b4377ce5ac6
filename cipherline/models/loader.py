"""Recipe loader with YAML parsing."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from cipherline.core.exceptions import RecipeError
from cipherline.models.recipe import Recipe


def load_recipe(path: str | Path) -> Recipe:
    """
    Load a recipe from a YAML file.

    Args:
        path: Path to recipe YAML file

    Returns:
        Validated Recipe instance

    Raises:
        RecipeError: If file not found, invalid YAML, or validation fails
    """
    recipe_path = Path(path)
    recipe_dict = _read_yaml(recipe_path)

    try:
        return Recipe.from_dict(recipe_dict)
    except ValidationError as e:
        raise RecipeError(
            f"Recipe validation failed: {e}", context={"path": str(path)}
        ) from e


def load_recipe_from_string(content: str, source: str = "<string>") -> Recipe:
    """Load a recipe from YAML text.

    Raises:
        RecipeError: If the YAML is invalid or validation fails
    """
    recipe_dict = _parse_yaml(content, source)
    try:
        return Recipe.from_dict(recipe_dict)
    except ValidationError as e:
        raise RecipeError(
            f"Recipe validation failed: {e}", context={"path": source}
        ) from e


def _read_yaml(recipe_path: Path) -> dict[str, Any]:
    try:
        content = recipe_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise RecipeError(
            f"Recipe file not found: {recipe_path}", context={"path": str(recipe_path)}
        )
    except UnicodeDecodeError as e:
        raise RecipeError(
            f"Recipe file is not valid UTF-8: {e.reason}", context={"path": str(recipe_path)}
        ) from e
    except OSError as e:
        raise RecipeError(
            f"Cannot read recipe file: {e.strerror or e}", context={"path": str(recipe_path)}
        ) from e
    return _parse_yaml(content, str(recipe_path))


def _parse_yaml(content: str, source: str) -> dict[str, Any]:
    try:
        recipe_dict = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise RecipeError(
            f"Invalid YAML in recipe file: {e}", context={"path": source}
        ) from e

    if not isinstance(recipe_dict, dict):
        raise RecipeError(
            "Recipe file must contain a YAML dictionary",
            context={"path": source},
        )
    return recipe_dict
