"""Structural validation for task-creation payloads."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError


class ViolationKind(str, Enum):
    """Structural violation categories reported to callers."""

    MISSING_FIELD = "missing_field"
    WRONG_TYPE = "wrong_type"
    UNEXPECTED_FIELD = "unexpected_field"


@dataclass(frozen=True, slots=True)
class SchemaViolation:
    """One structural problem found in a payload."""

    kind: ViolationKind
    field: str
    message: str

    def describe(self) -> str:
        target = self.field or "<payload>"
        return f"{target}: {self.kind.value} ({self.message})"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of payload validation."""

    is_valid: bool
    violations: tuple[SchemaViolation, ...]
    payload: TaskCreatePayload | None


class TaskCreatePayload(BaseModel):
    """Exactly one field, ``text``, holding a string."""

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    text: str


_KIND_BY_ERROR_TYPE = {
    "missing": ViolationKind.MISSING_FIELD,
    "extra_forbidden": ViolationKind.UNEXPECTED_FIELD,
}


def validate_task_payload(value: Any) -> ValidationResult:
    """Validate a task-creation payload without raising for bad input."""

    try:
        payload = TaskCreatePayload.model_validate(value)
    except PydanticValidationError as error:
        violations = tuple(
            SchemaViolation(
                kind=_KIND_BY_ERROR_TYPE.get(item["type"], ViolationKind.WRONG_TYPE),
                field=str(item["loc"][0]) if item["loc"] else "",
                message=item["msg"],
            )
            for item in error.errors(include_url=False)
        )
        return ValidationResult(is_valid=False, violations=violations, payload=None)
    return ValidationResult(is_valid=True, violations=(), payload=payload)
