"""Registry mapping operation kinds to their step models."""

from enum import Enum
from typing import TYPE_CHECKING, Callable

from cipherline.core.exceptions import StepError

if TYPE_CHECKING:
    from cipherline.models.step import BaseStep


class OperationKind(str, Enum):
    """Closed set of pipeline operations."""

    CAESAR = "caesar"
    REVERSE = "reverse"
    REPLACE = "replace"
    CASE_TRANSFORM = "case-transform"
    ROT13 = "rot13"
    A1Z26 = "a1z26"
    VIGENERE = "vigenere"
    RAIL_FENCE = "rail-fence"


DEFAULT_KIND = OperationKind.CAESAR

_step_registry: dict[OperationKind, "type[BaseStep]"] = {}


def coerce_kind(kind: OperationKind | str) -> OperationKind:
    """Return ``kind`` as an :class:`OperationKind`.

    Raises:
        StepError: If ``kind`` is not a known operation.
    """
    try:
        return OperationKind(kind)
    except ValueError as e:
        available = ", ".join(k.value for k in OperationKind)
        raise StepError(
            f"Unknown operation kind: '{kind}'",
            context={"kind": kind, "available_kinds": available},
        ) from e


def register_step(
    kind: OperationKind,
) -> Callable[["type[BaseStep]"], "type[BaseStep]"]:
    """Class decorator registering the step model for ``kind``.

        @register_step(OperationKind.REVERSE)
        class ReverseStep(BaseStep):
            ...

    Raises:
        StepError: If a model for ``kind`` is already registered.
    """

    def _register(cls: "type[BaseStep]") -> "type[BaseStep]":
        if kind in _step_registry:
            raise StepError(
                f"Operation '{kind.value}' is already registered",
                context={"kind": kind.value},
            )
        _step_registry[kind] = cls
        return cls

    return _register


def get_step_class(kind: OperationKind | str) -> "type[BaseStep]":
    """Return the step model registered for ``kind``.

    Raises:
        StepError: If the kind is unknown.
    """
    return _step_registry[coerce_kind(kind)]


def create_default_step(kind: OperationKind | str = DEFAULT_KIND, step_id: int = 1) -> "BaseStep":
    """Create a step of ``kind`` with its default parameters.

    Args:
        kind: Operation kind; defaults to Caesar.
        step_id: Identifier assigned by the owner of the pipeline.

    Returns:
        A new step instance.

    Raises:
        StepError: If the kind is unknown.
    """
    return get_step_class(kind)(id=step_id)


def list_operation_kinds() -> list[str]:
    """Return registered operation kinds in declaration order."""
    return [kind.value for kind in OperationKind if kind in _step_registry]
