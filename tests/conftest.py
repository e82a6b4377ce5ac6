"""Pytest configuration and shared fixtures."""

import logging
import tempfile
from pathlib import Path

import pytest

from cipherline.models.pipeline import PipelineState
from cipherline.models.step import CaesarStep, ReverseStep


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def recipe_dir(temp_dir):
    """Create a recipes subdirectory in temp_dir."""
    recipes_dir = temp_dir / "recipes"
    recipes_dir.mkdir()
    return recipes_dir


@pytest.fixture
def simple_recipe(recipe_dir):
    """Write a two-step Caesar + reverse recipe and return its path."""
    recipe_file = recipe_dir / "simple.yaml"
    recipe_file.write_text(
        """
name: simple
input: "Hello World"
steps:
  - kind: caesar
    shift: 3
  - kind: reverse
"""
    )
    return recipe_file


@pytest.fixture
def caesar_reverse_steps():
    """Caesar(encode, 3) followed by reverse."""
    return [CaesarStep(id=1, shift=3), ReverseStep(id=2)]


@pytest.fixture
def pipeline():
    """A fresh pipeline holding the single default step."""
    return PipelineState()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by configure_logging between tests."""
    yield
    logger = logging.getLogger("cipherline")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
