"""Step, pipeline and recipe models."""

# Registry must be imported first (step models register themselves on import)
from cipherline.models.registry import (
    DEFAULT_KIND,
    OperationKind,
    create_default_step,
    get_step_class,
    list_operation_kinds,
    register_step,
)
from cipherline.models.step import (
    A1Z26Step,
    BaseStep,
    CaesarStep,
    CaseTransformStep,
    RailFenceStep,
    ReplaceStep,
    ReverseStep,
    Rot13Step,
    Step,
    VigenereStep,
    parse_step,
)
from cipherline.models.pipeline import PipelineState
from cipherline.models.recipe import Recipe

__all__ = [
    # Registry
    "OperationKind",
    "DEFAULT_KIND",
    "register_step",
    "get_step_class",
    "create_default_step",
    "list_operation_kinds",
    # Steps
    "Step",
    "BaseStep",
    "CaesarStep",
    "ReverseStep",
    "ReplaceStep",
    "CaseTransformStep",
    "Rot13Step",
    "A1Z26Step",
    "VigenereStep",
    "RailFenceStep",
    "parse_step",
    # Pipeline
    "PipelineState",
    "Recipe",
]
