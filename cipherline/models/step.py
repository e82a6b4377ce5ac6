"""Step models: one pydantic model per operation kind.

Each model carries only the parameters of its own operation. Parameters are
coerced and clamped on construction and on every assignment, so a step
handed to the executor is always within range. ``id`` and ``kind`` are fixed
once the step exists.
"""

from abc import ABC, abstractmethod
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from cipherline.core.exceptions import StepError
from cipherline.core.params import clamp_rails, clamp_shift, coerce_text
from cipherline.models.registry import OperationKind, register_step
from cipherline.operations import (
    a1z26_decode,
    a1z26_encode,
    caesar,
    rail_fence_decode,
    rail_fence_encode,
    replace_text,
    reverse_text,
    rot13,
    transform_case,
    vigenere,
)

Mode = Literal["encode", "decode"]
CaseMode = Literal["upper", "lower", "title", "toggle"]


class BaseStep(BaseModel, ABC):
    """Common fields and behaviour for all steps. Not instantiable itself."""

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
        extra="ignore",
    )

    id: int = Field(default=1, frozen=True, description="Identifier unique within a pipeline")

    @abstractmethod
    def apply(self, text: str) -> str:
        """Apply this step to ``text`` and return the result."""

    def params(self) -> dict[str, Any]:
        """Return the kind-specific parameters."""
        return self.model_dump(exclude={"id", "kind"})


@register_step(OperationKind.CAESAR)
class CaesarStep(BaseStep):
    """Caesar shift. Shift is clamped to [0, 100] and wrapped mod 26 when applied."""

    kind: Literal["caesar"] = Field(default="caesar", frozen=True)
    mode: Mode = "encode"
    shift: int = Field(default=3, description="Letter shift, clamped to [0, 100]")
    preserve_case: bool = Field(default=True, alias="preserveCase")

    @field_validator("shift", mode="before")
    @classmethod
    def validate_shift(cls, v):
        return clamp_shift(v)

    def apply(self, text: str) -> str:
        return caesar(text, self.shift, self.mode, self.preserve_case)


@register_step(OperationKind.REVERSE)
class ReverseStep(BaseStep):
    kind: Literal["reverse"] = Field(default="reverse", frozen=True)

    def apply(self, text: str) -> str:
        return reverse_text(text)


@register_step(OperationKind.REPLACE)
class ReplaceStep(BaseStep):
    """Literal find-and-replace."""

    kind: Literal["replace"] = Field(default="replace", frozen=True)
    from_text: str = Field(default="", alias="fromText")
    to_text: str = Field(default="", alias="toText")
    match_case: bool = Field(default=True, alias="matchCase")

    @field_validator("from_text", "to_text", mode="before")
    @classmethod
    def validate_text(cls, v):
        return coerce_text(v)

    def apply(self, text: str) -> str:
        return replace_text(text, self.from_text, self.to_text, self.match_case)


@register_step(OperationKind.CASE_TRANSFORM)
class CaseTransformStep(BaseStep):
    kind: Literal["case-transform"] = Field(default="case-transform", frozen=True)
    case_mode: CaseMode = Field(default="upper", alias="caseMode")

    def apply(self, text: str) -> str:
        return transform_case(text, self.case_mode)


@register_step(OperationKind.ROT13)
class Rot13Step(BaseStep):
    kind: Literal["rot13"] = Field(default="rot13", frozen=True)

    def apply(self, text: str) -> str:
        return rot13(text)


@register_step(OperationKind.A1Z26)
class A1Z26Step(BaseStep):
    kind: Literal["a1z26"] = Field(default="a1z26", frozen=True)
    mode: Mode = "encode"

    def apply(self, text: str) -> str:
        if self.mode == "decode":
            return a1z26_decode(text)
        return a1z26_encode(text)


@register_step(OperationKind.VIGENERE)
class VigenereStep(BaseStep):
    """Vigenère cipher. A key without letters makes the step a no-op."""

    kind: Literal["vigenere"] = Field(default="vigenere", frozen=True)
    mode: Mode = "encode"
    key: str = "KEY"
    preserve_case: bool = Field(default=True, alias="preserveCase")

    @field_validator("key", mode="before")
    @classmethod
    def validate_key(cls, v):
        return coerce_text(v)

    def apply(self, text: str) -> str:
        return vigenere(text, self.key, self.mode, self.preserve_case)


@register_step(OperationKind.RAIL_FENCE)
class RailFenceStep(BaseStep):
    kind: Literal["rail-fence"] = Field(default="rail-fence", frozen=True)
    mode: Mode = "encode"
    rails: int = Field(default=3, description="Number of rails, clamped to [2, 10]")

    @field_validator("rails", mode="before")
    @classmethod
    def validate_rails(cls, v):
        return clamp_rails(v)

    def apply(self, text: str) -> str:
        if self.mode == "decode":
            return rail_fence_decode(text, self.rails)
        return rail_fence_encode(text, self.rails)


Step = Annotated[
    Union[
        CaesarStep,
        ReverseStep,
        ReplaceStep,
        CaseTransformStep,
        Rot13Step,
        A1Z26Step,
        VigenereStep,
        RailFenceStep,
    ],
    Field(discriminator="kind"),
]

_step_adapter = TypeAdapter(Step)


def parse_step(data: dict[str, Any]) -> BaseStep:
    """Build a step from a mapping such as ``{"kind": "caesar", "shift": 5}``.

    Raises:
        StepError: If the kind is unknown or a parameter is invalid.
    """
    try:
        return _step_adapter.validate_python(data)
    except ValidationError as e:
        raise StepError(
            f"Invalid step definition: {e}",
            context={"kind": data.get("kind") if isinstance(data, dict) else None},
        ) from e
