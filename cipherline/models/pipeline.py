"""Caller-owned pipeline state: the ordered step list and its id counter."""

import logging
from typing import Any, Iterable, Iterator, Literal

from pydantic import ValidationError

from cipherline.core.exceptions import PipelineError, StepError
from cipherline.core.executor import ExecutionResult, run
from cipherline.models.registry import DEFAULT_KIND, OperationKind, create_default_step
from cipherline.models.step import BaseStep

logger = logging.getLogger(__name__)

_IMMUTABLE_FIELDS = ("id", "kind")


class PipelineState:
    """An ordered, never-empty list of steps plus the next step id.

    Ids come from a counter that only moves forward, so an id is never
    reused within the lifetime of the state, even across :meth:`reset`.
    """

    def __init__(self, steps: Iterable[BaseStep] | None = None):
        """Initialize with ``steps`` or a single default Caesar step.

        Raises:
            PipelineError: If two steps share an id.
        """
        initial = list(steps) if steps is not None else []
        ids = [step.id for step in initial]
        if len(set(ids)) != len(ids):
            raise PipelineError(
                "Step ids must be unique within a pipeline",
                context={"ids": ids},
            )

        self._next_id = max(ids, default=0) + 1
        self._steps: list[BaseStep] = initial
        if not self._steps:
            self._steps.append(self._new_step(DEFAULT_KIND))

    @property
    def steps(self) -> tuple[BaseStep, ...]:
        """Current steps in order. Step objects are live, not copies."""
        return tuple(self._steps)

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[BaseStep]:
        return iter(tuple(self._steps))

    def _new_step(self, kind: OperationKind | str) -> BaseStep:
        step = create_default_step(kind, self._next_id)
        self._next_id += 1
        return step

    def _index_of(self, step_id: int) -> int:
        for index, step in enumerate(self._steps):
            if step.id == step_id:
                return index
        return -1

    def get_step(self, step_id: int) -> BaseStep:
        """Return the step with ``step_id``.

        Raises:
            PipelineError: If no step has that id.
        """
        index = self._index_of(step_id)
        if index < 0:
            raise PipelineError(
                f"Step {step_id} not found",
                context={"step_id": step_id, "available_ids": [s.id for s in self._steps]},
            )
        return self._steps[index]

    def add_step(self, kind: OperationKind | str, position: int | None = None) -> BaseStep:
        """Insert a default step of ``kind``.

        Args:
            kind: Operation kind of the new step.
            position: Insert index, clamped into ``[0, len]``. ``None`` appends.

        Returns:
            The new step.

        Raises:
            StepError: If ``kind`` is unknown.
        """
        step = self._new_step(kind)
        if position is None:
            position = len(self._steps)
        position = min(max(position, 0), len(self._steps))
        self._steps.insert(position, step)
        logger.debug(
            "Added step",
            extra={"step_id": step.id, "context": {"kind": step.kind, "position": position}},
        )
        return step

    def remove_step(self, step_id: int) -> BaseStep | None:
        """Remove the step with ``step_id``.

        Removing the only remaining step replaces it with a fresh default
        step. Unknown ids are ignored.

        Returns:
            The removed step, or None if no step had that id.
        """
        index = self._index_of(step_id)
        if index < 0:
            return None

        removed = self._steps.pop(index)
        if not self._steps:
            self._steps.append(self._new_step(DEFAULT_KIND))
        logger.debug("Removed step", extra={"step_id": step_id})
        return removed

    def move_step(self, step_id: int, direction: Literal["up", "down"]) -> bool:
        """Swap a step with its neighbour above (``up``) or below (``down``).

        Returns:
            True if the step moved. Unknown ids and moves past either end
            leave the pipeline unchanged and return False.
        """
        if direction not in ("up", "down"):
            raise PipelineError(
                f"Invalid move direction: '{direction}'",
                context={"direction": direction},
            )
        index = self._index_of(step_id)
        if index < 0:
            return False

        target = index - 1 if direction == "up" else index + 1
        if target < 0 or target >= len(self._steps):
            return False

        self.swap_steps(index, target)
        return True

    def swap_steps(self, first: int, second: int) -> None:
        """Swap the steps at two indices.

        Raises:
            PipelineError: If either index is out of range.
        """
        size = len(self._steps)
        for index in (first, second):
            if not 0 <= index < size:
                raise PipelineError(
                    f"Step index {index} out of range",
                    context={"index": index, "size": size},
                )
        self._steps[first], self._steps[second] = self._steps[second], self._steps[first]

    def update_step(self, step_id: int, **params: Any) -> BaseStep:
        """Edit parameters of a step in place.

        Values are validated and clamped exactly as on construction.
        Parameters that the step's kind does not have are ignored. Accepts
        both ``preserve_case`` and ``preserveCase`` style names.

        Returns:
            The updated step.

        Raises:
            PipelineError: If no step has ``step_id``.
            StepError: If ``id`` or ``kind`` is changed or a value is invalid.
        """
        step = self.get_step(step_id)
        fields = type(step).model_fields
        aliases = {info.alias: name for name, info in fields.items() if info.alias}

        for key in _IMMUTABLE_FIELDS:
            if key in params:
                raise StepError(
                    f"Step '{key}' cannot be changed; remove and add a new step instead",
                    context={"step_id": step_id, "field": key},
                )

        updates = {}
        for key, value in params.items():
            name = aliases.get(key, key)
            if name in fields:
                updates[name] = value

        # Validate all edits on a copy so a bad value leaves the step untouched
        candidate = step.model_copy()
        try:
            for name, value in updates.items():
                setattr(candidate, name, value)
        except ValidationError as e:
            raise StepError(
                f"Invalid parameter for step {step_id}: {e}",
                context={"step_id": step_id, "kind": step.kind},
            ) from e

        for name in updates:
            setattr(step, name, getattr(candidate, name))
        return step

    def reset(self) -> None:
        """Replace all steps with a single default step."""
        self._steps = [self._new_step(DEFAULT_KIND)]

    def snapshot(self) -> tuple[BaseStep, ...]:
        """Return independent copies of the current steps."""
        return tuple(step.model_copy(deep=True) for step in self._steps)

    def run(self, input_text: str) -> ExecutionResult:
        """Run the pipeline over ``input_text`` using a snapshot of the steps."""
        return run(input_text, self.snapshot())
