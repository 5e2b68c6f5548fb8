"""Employee document store backed by SQLModel + SQLite."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import func
from sqlalchemy import update as sa_update
from sqlalchemy.exc import DBAPIError
from sqlmodel import Session, col, select

from employee_tasks.storage.alembic_runner import upgrade_head
from employee_tasks.storage.common import build_sqlite_engine
from employee_tasks.storage.sqlmodel_models import EmployeeRow
from employee_tasks.tasks.errors import StoreFault
from employee_tasks.tasks.models import AppendOutcome, EmployeeRecord, EmployeeTasks, Task

logger = logging.getLogger(__name__)

_SQLITE_INT_MIN = -(2**63)
_SQLITE_INT_MAX = 2**63 - 1


class EmployeeTaskRepository:
    """Per-employee task collections with an atomic todo append.

    Every public method opens its own short-lived session. Lookups that match
    nothing return ``None``; database errors surface as ``StoreFault``.
    """

    def __init__(self, db_path: Path, *, busy_timeout_ms: int = 5_000) -> None:
        self.db_path = db_path
        self.engine = build_sqlite_engine(db_path=db_path, busy_timeout_ms=busy_timeout_ms)

    def close(self) -> None:
        """Close underlying DB resources."""

        self.engine.dispose()

    def init_schema(self) -> None:
        """Run schema migrations up to head."""

        with _store_faults("init_schema"):
            upgrade_head(self.db_path)
        logger.info("Employee task schema ready db=%s", self.db_path)

    def find_employee(self, emp_id: int) -> EmployeeRecord | None:
        """Exact-match lookup of the full employee document."""

        if not _is_storable_id(emp_id):
            return None
        with _store_faults("find_employee"), Session(self.engine) as session:
            row = session.exec(
                select(EmployeeRow).where(col(EmployeeRow.emp_id) == emp_id),
            ).one_or_none()
            if row is None:
                return None
            return EmployeeRecord(
                emp_id=row.emp_id,
                first_name=row.first_name,
                last_name=row.last_name,
                todo=_decode_tasks(row.todo_json),
                done=_decode_tasks(row.done_json),
            )

    def find_employee_tasks(self, emp_id: int) -> EmployeeTasks | None:
        """Projection of ``empId``, ``todo`` and ``done`` for one employee."""

        if not _is_storable_id(emp_id):
            return None
        with _store_faults("find_employee_tasks"), Session(self.engine) as session:
            row = session.exec(
                select(
                    col(EmployeeRow.emp_id),
                    col(EmployeeRow.todo_json),
                    col(EmployeeRow.done_json),
                ).where(col(EmployeeRow.emp_id) == emp_id),
            ).one_or_none()
        if row is None:
            return None
        found_id, todo_json, done_json = row
        return EmployeeTasks(
            emp_id=int(found_id),
            todo=_decode_tasks(todo_json),
            done=_decode_tasks(done_json),
        )

    def append_todo_task(self, emp_id: int, task: Task) -> AppendOutcome:
        """Atomically append ``task`` to the end of the employee's todo list.

        The append happens inside a single UPDATE statement, so the array is
        never read into Python and written back.
        """

        if not _is_storable_id(emp_id):
            return AppendOutcome.EMPLOYEE_NOT_FOUND
        encoded = json.dumps(task.to_payload(), ensure_ascii=False)
        statement = (
            sa_update(EmployeeRow)
            .where(col(EmployeeRow.emp_id) == emp_id)
            .values(
                todo_json=func.json_insert(
                    func.coalesce(col(EmployeeRow.todo_json), "[]"),
                    "$[#]",
                    func.json(encoded),
                ),
            )
        )
        with _store_faults("append_todo_task"), Session(self.engine) as session:
            result = session.exec(statement)
            if result.rowcount == 1:
                session.commit()
                logger.debug("Appended task id=%s to todo of emp_id=%s", task.id, emp_id)
                return AppendOutcome.UPDATED
            session.rollback()
            still_exists = (
                session.exec(
                    select(col(EmployeeRow.emp_id)).where(col(EmployeeRow.emp_id) == emp_id),
                ).first()
                is not None
            )
        if still_exists:
            logger.warning("Todo append modified no rows for existing emp_id=%s", emp_id)
            return AppendOutcome.NO_CHANGE
        return AppendOutcome.EMPLOYEE_NOT_FOUND


@contextmanager
def _store_faults(operation: str) -> Iterator[None]:
    try:
        yield
    except DBAPIError as error:
        logger.exception("Store operation %s failed", operation)
        raise StoreFault(f"Store operation {operation} failed: {error.orig}") from error


def _decode_tasks(raw: str | None) -> list[Task]:
    if not raw:
        return []
    try:
        items = json.loads(raw)
    except json.JSONDecodeError as error:
        raise StoreFault(f"Stored task list is not valid JSON: {error}") from error
    if not isinstance(items, list):
        raise StoreFault("Stored task list must be a JSON array.")
    try:
        return [Task.from_payload(item) for item in items]
    except (KeyError, TypeError) as error:
        raise StoreFault(f"Stored task list holds a malformed task: {error!r}") from error


def _is_storable_id(emp_id: int) -> bool:
    # Ids outside SQLite INTEGER range cannot match any row.
    return _SQLITE_INT_MIN <= emp_id <= _SQLITE_INT_MAX
