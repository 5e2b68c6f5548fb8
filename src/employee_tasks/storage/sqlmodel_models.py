"""SQLModel ORM tables for the employee task store."""

from __future__ import annotations

from sqlalchemy import Column, Integer, Text
from sqlmodel import Field, SQLModel


class EmployeeRow(SQLModel, table=True):
    """One document per employee; task lists are JSON arrays of {id, text}."""

    __tablename__ = "employees"  # type: ignore[bad-override]

    emp_id: int = Field(
        sa_column=Column(Integer, primary_key=True, autoincrement=False, nullable=False),
    )
    first_name: str = Field(default="", sa_column=Column(Text, nullable=False, server_default=""))
    last_name: str = Field(default="", sa_column=Column(Text, nullable=False, server_default=""))
    todo_json: str | None = Field(default=None, sa_column=Column(Text, nullable=True))
    done_json: str | None = Field(default=None, sa_column=Column(Text, nullable=True))
