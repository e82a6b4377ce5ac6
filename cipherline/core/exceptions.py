"""Errors raised at the edges of the engine.

The operations and the executor never raise for any input text; these
exceptions come from building steps, editing a pipeline and loading recipes.
"""


class CipherlineError(Exception):
    """Base exception; ``context`` carries the offending ids, kinds or paths."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class StepError(CipherlineError):
    """Unknown operation kind, invalid mode, or an attempt to change a step's id or kind."""


class PipelineError(CipherlineError):
    """Step id not in the pipeline, duplicate ids, or an index out of range."""


class RecipeError(CipherlineError):
    """Recipe file missing, unreadable, not YAML, or describing an invalid pipeline."""
