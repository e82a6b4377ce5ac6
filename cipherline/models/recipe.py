"""Recipe model: a named pipeline definition with optional default input."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cipherline.models.pipeline import PipelineState
from cipherline.models.step import Step


class Recipe(BaseModel):
    """Complete pipeline definition as written in a recipe file."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(description="Recipe name (required)")
    description: str | None = Field(default=None, description="Free-form description")
    input_text: str = Field(
        default="",
        alias="input",
        description="Default input text, used when none is supplied at run time",
    )
    steps: list[Step] = Field(min_length=1, description="Ordered pipeline steps")

    @model_validator(mode="before")
    @classmethod
    def assign_step_ids(cls, data: Any) -> Any:
        """Number steps without an explicit id after the highest explicit one."""
        if not isinstance(data, dict):
            return data
        steps = data.get("steps")
        if not isinstance(steps, list):
            return data

        explicit = [
            _as_int(step["id"])
            for step in steps
            if isinstance(step, dict) and step.get("id") is not None
        ]
        next_id = max((i for i in explicit if i is not None), default=0) + 1
        numbered = []
        for step in steps:
            if isinstance(step, dict) and step.get("id") is None:
                step = {**step, "id": next_id}
                next_id += 1
            numbered.append(step)
        return {**data, "steps": numbered}

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "Recipe":
        """Validate that step ids are unique."""
        ids = [step.id for step in self.steps]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate step ids: {duplicates}")
        return self

    @classmethod
    def from_dict(cls, data: dict) -> "Recipe":
        """Create Recipe from a parsed recipe document."""
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str) -> "Recipe":
        """Load a recipe from a YAML file."""
        from cipherline.models.loader import load_recipe

        return load_recipe(path)

    def to_pipeline(self) -> PipelineState:
        """Create a pipeline state holding copies of this recipe's steps."""
        return PipelineState(step.model_copy(deep=True) for step in self.steps)


def _as_int(value: Any) -> int | None:
    # Mirrors pydantic's lax int coercion ("3" -> 3); anything else is left to validation
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
