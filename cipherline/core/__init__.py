"""Core module for cipherline package."""

from cipherline.core.exceptions import (
    CipherlineError,
    PipelineError,
    RecipeError,
    StepError,
)
from cipherline.core.executor import Applicable, ExecutionResult, run
from cipherline.core.letters import shift_letter, shift_text
from cipherline.core.params import clamp_rails, clamp_shift, coerce_number, coerce_text

__all__ = [
    "CipherlineError",
    "StepError",
    "PipelineError",
    "RecipeError",
    "Applicable",
    "ExecutionResult",
    "run",
    "shift_letter",
    "shift_text",
    "clamp_shift",
    "clamp_rails",
    "coerce_number",
    "coerce_text",
]
