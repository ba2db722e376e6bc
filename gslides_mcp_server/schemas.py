"""
Argument schemas for the Google Slides tools.

Each tool validates its raw arguments against one of the pydantic models
below. ``validate_arguments`` turns a pydantic ``ValidationError`` into a
flat list of ``(path, reason)`` pairs so callers never deal with pydantic
error objects directly.
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

# (dot-separated field path, human readable reason)
Violation = Tuple[str, str]

ModelT = TypeVar("ModelT", bound=BaseModel)


class ToolArgs(BaseModel):
    """Base for tool argument models.

    Strict so that ``"true"`` is not accepted for a boolean or ``123`` for a
    string; unknown keys are ignored. Optional fields may be omitted but not
    set to null.
    """

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise PydanticCustomError("null_value", "Expected a value, received null")
        return value


class CreatePresentationArgs(ToolArgs):
    title: str = Field(min_length=1)


class GetPresentationArgs(ToolArgs):
    presentationId: str = Field(min_length=1)
    fields: Optional[str] = None


class BatchUpdatePresentationArgs(ToolArgs):
    presentationId: str = Field(min_length=1)
    # Request and write-control bodies are opaque; the Slides API validates them.
    requests: List[Any] = Field(min_length=1)
    writeControl: Optional[Any] = None


class GetPageArgs(ToolArgs):
    presentationId: str = Field(min_length=1)
    pageObjectId: str = Field(min_length=1)


class SummarizePresentationArgs(ToolArgs):
    presentationId: str = Field(min_length=1)
    include_notes: Optional[bool] = None


# Messages for empty values of required fields, keyed by pydantic error type.
EMPTY_VALUE_MESSAGES: Dict[str, str] = {
    "string_too_short": '"{field}" (string) is required.',
    "too_short": '"{field}" (array) is required.',
}


@dataclass(frozen=True)
class ValidationResult(Generic[ModelT]):
    """Either validated arguments or the violations that prevented them."""

    value: Optional[ModelT] = None
    violations: Tuple[Violation, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.violations


def _reason(error: Dict[str, Any], path: str) -> str:
    error_type = error["type"]
    if error_type == "missing":
        return "Required"
    if error_type in EMPTY_VALUE_MESSAGES:
        return EMPTY_VALUE_MESSAGES[error_type].format(field=path)
    return error["msg"]


def violations_from(exc: ValidationError) -> List[Violation]:
    """Flatten a pydantic ``ValidationError`` into (path, reason) pairs."""
    violations: List[Violation] = []
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"])
        violations.append((path, _reason(error, path)))
    return violations


def validate_arguments(schema: Type[ModelT], raw_args: Any) -> ValidationResult[ModelT]:
    """Validate ``raw_args`` against ``schema``.

    Args:
        schema: Pydantic model class describing the tool arguments
        raw_args: Untyped arguments as received from the caller

    Returns:
        ValidationResult holding the model instance, or one violation per
        offending field
    """
    try:
        return ValidationResult(value=schema.model_validate(raw_args))
    except ValidationError as exc:
        return ValidationResult(violations=tuple(violations_from(exc)))


def format_violations(violations: Tuple[Violation, ...]) -> str:
    """Render violations as ``path: reason`` joined by ``"; "``."""
    return "; ".join(f"{path}: {reason}" for path, reason in violations)
