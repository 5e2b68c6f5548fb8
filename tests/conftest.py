"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from employee_tasks.provisioning import provision_employee
from employee_tasks.tasks.models import Task
from employee_tasks.tasks.repository import EmployeeTaskRepository
from employee_tasks.tasks.services import TaskService


@pytest.fixture()
def repository(tmp_path: Path) -> Iterator[EmployeeTaskRepository]:
    """Migrated repository on a fresh SQLite file."""

    repo = EmployeeTaskRepository(tmp_path / "employees.db")
    repo.init_schema()
    try:
        yield repo
    finally:
        repo.close()


@pytest.fixture()
def service(repository: EmployeeTaskRepository) -> TaskService:
    return TaskService(repository=repository)


@pytest.fixture()
def employee_1007(repository: EmployeeTaskRepository) -> int:
    """Employee with one todo task and an empty done list."""

    provision_employee(
        repository,
        emp_id=1007,
        first_name="Ada",
        last_name="Lovelace",
        todo=[Task(id="t1", text="Write report")],
        done=[],
    )
    return 1007
