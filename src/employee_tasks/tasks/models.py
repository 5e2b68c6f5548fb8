"""Domain models for employee task lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AppendOutcome(str, Enum):
    """Result of an atomic todo append."""

    UPDATED = "updated"
    EMPLOYEE_NOT_FOUND = "employee_not_found"
    NO_CHANGE = "no_change"


@dataclass(frozen=True, slots=True)
class Task:
    """One to-do item."""

    id: str
    text: str

    def to_payload(self) -> dict[str, str]:
        return {"id": self.id, "text": self.text}

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> Task:
        return cls(id=str(data["id"]), text=str(data["text"]))


@dataclass(slots=True)
class EmployeeTasks:
    """Projection of an employee document: id and both task lists only."""

    emp_id: int
    todo: list[Task] = field(default_factory=list)
    done: list[Task] = field(default_factory=list)

    @property
    def has_tasks(self) -> bool:
        return bool(self.todo or self.done)

    def to_payload(self) -> dict[str, Any]:
        return {
            "empId": self.emp_id,
            "todo": [task.to_payload() for task in self.todo],
            "done": [task.to_payload() for task in self.done],
        }


@dataclass(slots=True)
class EmployeeRecord:
    """Full employee document."""

    emp_id: int
    first_name: str
    last_name: str
    todo: list[Task] = field(default_factory=list)
    done: list[Task] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        return {
            "empId": self.emp_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "todo": [task.to_payload() for task in self.todo],
            "done": [task.to_payload() for task in self.done],
        }


@dataclass(frozen=True, slots=True)
class CreatedTask:
    """Identifier of a freshly created task."""

    id: str

    def to_payload(self) -> dict[str, str]:
        return {"id": self.id}
