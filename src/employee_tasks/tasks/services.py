"""Use-case services for employee task lists."""

from __future__ import annotations

import logging
import re
from typing import Any
from uuid import uuid4

from employee_tasks.tasks.errors import InputError, NotFoundError, TaskValidationError, WriteFailure
from employee_tasks.tasks.models import (
    AppendOutcome,
    CreatedTask,
    EmployeeRecord,
    EmployeeTasks,
    Task,
)
from employee_tasks.tasks.repository import EmployeeTaskRepository
from employee_tasks.tasks.validator import validate_task_payload

logger = logging.getLogger(__name__)

_EMP_ID_PATTERN = re.compile(r"-?[0-9]+")


class TaskService:
    """Composes payload validation and the employee store.

    Holds no state besides the repository, so one instance can serve
    concurrent callers.
    """

    def __init__(self, *, repository: EmployeeTaskRepository) -> None:
        self.repository = repository

    def get_employee(self, emp_id_raw: str | int) -> EmployeeRecord:
        """Return the full employee document."""

        emp_id = parse_emp_id(emp_id_raw)
        employee = self.repository.find_employee(emp_id)
        if employee is None:
            logger.info("Employee not found emp_id=%s", emp_id)
            raise NotFoundError("Employee not found")
        return employee

    def get_tasks(self, emp_id_raw: str | int) -> EmployeeTasks:
        """Return both task lists of an employee.

        A missing employee and an employee with no tasks at all are reported
        the same way.
        """

        emp_id = parse_emp_id(emp_id_raw)
        tasks = self.repository.find_employee_tasks(emp_id)
        if tasks is None or not tasks.has_tasks:
            logger.info("Employee has no tasks emp_id=%s", emp_id)
            raise NotFoundError("Employee has no tasks")
        return tasks

    def create_task(self, emp_id_raw: str | int, payload: Any) -> CreatedTask:
        """Validate ``payload`` and append a new task to the employee's todo list.

        Existence is checked before the payload is validated.
        """

        emp_id = parse_emp_id(emp_id_raw)
        if self.repository.find_employee(emp_id) is None:
            logger.info("Employee not found emp_id=%s", emp_id)
            raise NotFoundError("Employee not found")

        result = validate_task_payload(payload)
        if not result.is_valid or result.payload is None:
            logger.warning(
                "Invalid task payload emp_id=%s violations=%s",
                emp_id,
                "; ".join(violation.describe() for violation in result.violations),
            )
            raise TaskValidationError("Invalid task payload", result.violations)

        task = Task(id=str(uuid4()), text=result.payload.text)
        outcome = self.repository.append_todo_task(emp_id, task)
        # A vanished employee is reported as a write failure, not as not-found.
        if outcome is not AppendOutcome.UPDATED:
            logger.warning("Unable to create task emp_id=%s outcome=%s", emp_id, outcome.value)
            raise WriteFailure("Unable to create task")

        logger.info("Created task id=%s emp_id=%s", task.id, emp_id)
        return CreatedTask(id=task.id)


def parse_emp_id(value: str | int) -> int:
    """Parse an employee id given as a decimal string or an int."""

    if isinstance(value, bool):
        raise InputError("Input must be a number")
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if _EMP_ID_PATTERN.fullmatch(text) is None:
        raise InputError("Input must be a number")
    try:
        return int(text)
    except ValueError as error:
        # Beyond the interpreter digit limit for int conversion.
        raise InputError("Input must be a number") from error
