"""Cipherline - composable text transformation pipelines.

Chains classical ciphers and text edits into an ordered pipeline and
reports the output of every stage.
"""

__version__ = "0.1.0"

# Public API
from cipherline.api import (
    create_default_step,
    from_yaml,
    run,
    run_recipe,
    run_recipe_from_yaml,
)

# Exceptions
from cipherline.core.exceptions import (
    CipherlineError,
    PipelineError,
    RecipeError,
    StepError,
)
from cipherline.core.executor import ExecutionResult

# Models
from cipherline.models import (
    A1Z26Step,
    BaseStep,
    CaesarStep,
    CaseTransformStep,
    OperationKind,
    PipelineState,
    RailFenceStep,
    Recipe,
    ReplaceStep,
    ReverseStep,
    Rot13Step,
    Step,
    VigenereStep,
    list_operation_kinds,
    parse_step,
)

__all__ = [
    # Version
    "__version__",
    # Public API
    "run",
    "create_default_step",
    "from_yaml",
    "run_recipe",
    "run_recipe_from_yaml",
    "ExecutionResult",
    # Models
    "OperationKind",
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
    "list_operation_kinds",
    "PipelineState",
    "Recipe",
    # Exceptions
    "CipherlineError",
    "StepError",
    "PipelineError",
    "RecipeError",
]
