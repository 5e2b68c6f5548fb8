"""Error taxonomy for task use cases.

``TaskServiceError`` subclasses are recoverable, caller-visible outcomes.
``StoreFault`` is deliberately outside that hierarchy: it is fatal to the
current request and must reach the boundary layer as-is.
"""

from __future__ import annotations

from employee_tasks.tasks.validator import SchemaViolation


class TaskServiceError(Exception):
    """Base class for recoverable task service failures."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InputError(TaskServiceError):
    """Malformed caller input, for example a non-numeric employee id."""

    status_code = 400


class NotFoundError(TaskServiceError):
    """No matching employee, or an employee without tasks."""

    status_code = 404


class TaskValidationError(TaskServiceError):
    """Task payload failed schema validation."""

    status_code = 400

    def __init__(self, message: str, violations: tuple[SchemaViolation, ...]) -> None:
        super().__init__(message)
        self.violations = violations


class WriteFailure(TaskServiceError):
    """The store modified no document although the employee existed."""

    status_code = 409


class StoreFault(RuntimeError):
    """Connectivity, timeout or internal storage error."""

    status_code = 500
