"""Employee provisioning for local setups and fixtures.

The task service never creates employees; records are inserted here.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from employee_tasks.storage.sqlmodel_models import EmployeeRow
from employee_tasks.tasks.models import Task
from employee_tasks.tasks.repository import EmployeeTaskRepository

logger = logging.getLogger(__name__)


def provision_employee(  # noqa: PLR0913
    repository: EmployeeTaskRepository,
    *,
    emp_id: int,
    first_name: str = "",
    last_name: str = "",
    todo: Sequence[Task] | None = None,
    done: Sequence[Task] | None = None,
) -> None:
    """Insert one employee document.

    ``None`` task lists are stored as absent, an empty sequence as ``[]``.
    """

    row = EmployeeRow(
        emp_id=emp_id,
        first_name=first_name,
        last_name=last_name,
        todo_json=_encode_tasks(todo),
        done_json=_encode_tasks(done),
    )
    with Session(repository.engine) as session:
        session.add(row)
        try:
            session.commit()
        except IntegrityError as error:
            session.rollback()
            raise ValueError(f"Employee already exists: {emp_id}") from error
    logger.info("Provisioned employee emp_id=%s", emp_id)


def _encode_tasks(tasks: Sequence[Task] | None) -> str | None:
    if tasks is None:
        return None
    return json.dumps([task.to_payload() for task in tasks], ensure_ascii=False)
