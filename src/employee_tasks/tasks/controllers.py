"""Controllers for employee and task CLI commands."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from employee_tasks.config import Settings
from employee_tasks.provisioning import provision_employee
from employee_tasks.tasks.errors import StoreFault, TaskServiceError, TaskValidationError
from employee_tasks.tasks.repository import EmployeeTaskRepository
from employee_tasks.tasks.services import TaskService, parse_emp_id

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DbInitCommand:
    """CLI input for schema initialization."""

    db_path: Path | None


@dataclass(slots=True)
class EmployeeSeedCommand:
    """CLI input for provisioning one employee."""

    db_path: Path | None
    emp_id: str
    first_name: str
    last_name: str


@dataclass(slots=True)
class EmployeeShowCommand:
    """CLI input for employee lookup."""

    db_path: Path | None
    emp_id: str


@dataclass(slots=True)
class TasksListCommand:
    """CLI input for listing an employee's tasks."""

    db_path: Path | None
    emp_id: str


@dataclass(slots=True)
class TasksAddCommand:
    """CLI input for task creation.

    ``payload_json`` is passed through as the raw request body; ``text`` is a
    shortcut for ``{"text": text}``.
    """

    db_path: Path | None
    emp_id: str
    text: str | None = None
    payload_json: str | None = None


@dataclass(slots=True)
class CommandResult:
    """Rendered command output."""

    lines: list[str]
    success: bool


class TasksCliController:
    """Maps CLI commands onto the task service and renders outcomes."""

    def init_db(self, command: DbInitCommand) -> CommandResult:
        settings = _settings(command.db_path)
        return _guarded(settings, lambda _service: [f"Schema ready: {settings.db_path}"])

    def seed_employee(self, command: EmployeeSeedCommand) -> CommandResult:
        settings = _settings(command.db_path)

        def _seed(service: TaskService) -> list[str]:
            emp_id = parse_emp_id(command.emp_id)
            try:
                provision_employee(
                    service.repository,
                    emp_id=emp_id,
                    first_name=command.first_name,
                    last_name=command.last_name,
                )
            except ValueError as error:
                raise _ConflictError(str(error)) from error
            return [f"Employee provisioned: {emp_id}"]

        return _guarded(settings, _seed)

    def show_employee(self, command: EmployeeShowCommand) -> CommandResult:
        settings = _settings(command.db_path)
        return _guarded(
            settings,
            lambda service: [_dump(service.get_employee(command.emp_id).to_payload())],
        )

    def list_tasks(self, command: TasksListCommand) -> CommandResult:
        settings = _settings(command.db_path)
        return _guarded(
            settings,
            lambda service: [_dump(service.get_tasks(command.emp_id).to_payload())],
        )

    def add_task(self, command: TasksAddCommand) -> CommandResult:
        settings = _settings(command.db_path)

        def _add(service: TaskService) -> list[str]:
            payload = _request_payload(command)
            return [_dump(service.create_task(command.emp_id, payload).to_payload())]

        return _guarded(settings, _add)


class _ConflictError(TaskServiceError):
    status_code = 409


class _BadRequestError(TaskServiceError):
    status_code = 400


def _settings(db_path: Path | None) -> Settings:
    settings = Settings.from_env(db_path=db_path)
    settings.validate()
    return settings


def _request_payload(command: TasksAddCommand) -> Any:
    if command.payload_json is not None:
        try:
            return json.loads(command.payload_json)
        except json.JSONDecodeError as error:
            raise _BadRequestError(f"Payload is not valid JSON: {error}") from error
    return {"text": command.text}


def _guarded(settings: Settings, action: Callable[[TaskService], list[str]]) -> CommandResult:
    try:
        with _service(settings) as service:
            return CommandResult(lines=action(service), success=True)
    except TaskServiceError as error:
        lines = [f"({error.status_code}) {error.message}"]
        if isinstance(error, TaskValidationError):
            lines.extend(f"  {violation.describe()}" for violation in error.violations)
        return CommandResult(lines=lines, success=False)
    except StoreFault:
        logger.exception("Store fault while handling command db=%s", settings.db_path)
        return CommandResult(
            lines=[f"({StoreFault.status_code}) Internal store error, see log for details"],
            success=False,
        )


@contextmanager
def _service(settings: Settings) -> Iterator[TaskService]:
    repository = EmployeeTaskRepository(
        db_path=settings.db_path,
        busy_timeout_ms=settings.storage.busy_timeout_ms,
    )
    try:
        repository.init_schema()
        yield TaskService(repository=repository)
    finally:
        repository.close()


def _dump(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False)
