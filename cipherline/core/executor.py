"""Pipeline executor: folds an ordered list of steps over an input text."""

import logging
from dataclasses import dataclass
from typing import Any, Iterator, Protocol, Sequence, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Applicable(Protocol):
    """Anything that can be applied to a text as a pipeline stage."""

    def apply(self, text: str) -> str:
        """Return the transformed text."""
        ...


@dataclass(frozen=True)
class ExecutionResult:
    """Outputs of one pipeline run.

    ``stage_outputs[i]`` is the text after applying ``steps[0..i]``.
    """

    input_text: str
    stage_outputs: tuple[str, ...]
    steps: tuple[Any, ...] = ()

    @property
    def final_output(self) -> str:
        """Output of the last stage, or the input text if there were no steps."""
        if not self.stage_outputs:
            return self.input_text
        return self.stage_outputs[-1]

    def stages(self) -> Iterator[tuple[Any, str]]:
        """Yield ``(step, output)`` pairs in pipeline order."""
        return zip(self.steps, self.stage_outputs)


def run(input_text: str, steps: Sequence[Applicable]) -> ExecutionResult:
    """Apply ``steps`` to ``input_text`` in order.

    Each step sees only the output of the step before it. The sequence is
    copied before execution, so later changes to the caller's list do not
    affect this run.

    Args:
        input_text: Text fed to the first step.
        steps: Ordered steps, typically a pipeline snapshot.

    Returns:
        ExecutionResult with one output per step.
    """
    snapshot = tuple(steps)
    logger.debug(
        "Running pipeline",
        extra={"context": {"steps": len(snapshot), "input_length": len(input_text)}},
    )

    current = input_text
    outputs = []
    for step_index, step in enumerate(snapshot):
        current = _apply_step(current, step, step_index)
        outputs.append(current)

    logger.debug(
        "Pipeline finished",
        extra={"context": {"steps": len(snapshot), "output_length": len(current)}},
    )
    return ExecutionResult(
        input_text=input_text,
        stage_outputs=tuple(outputs),
        steps=snapshot,
    )


def _apply_step(text: str, step: Any, step_index: int) -> str:
    """Apply a single step, passing the text through for unusable steps."""
    if not isinstance(step, Applicable):
        logger.warning(
            "Skipping unknown step",
            extra={"context": {"step_index": step_index, "step_type": type(step).__name__}},
        )
        return text
    return step.apply(text)
