"""CLI entrypoint for employee-tasks."""

from collections.abc import Callable
from pathlib import Path

import rich_click as click

from employee_tasks import __version__
from employee_tasks.config import Settings
from employee_tasks.tasks.controllers import (
    CommandResult,
    DbInitCommand,
    EmployeeSeedCommand,
    EmployeeShowCommand,
    TasksAddCommand,
    TasksCliController,
    TasksListCommand,
)

click.rich_click.USE_MARKDOWN = True
TASKS_CONTROLLER = TasksCliController()


@click.group()
@click.version_option(version=__version__, prog_name="employee-tasks")
def employee_tasks() -> None:
    """Employee task lists CLI."""

    try:
        settings = Settings.from_env()
        settings.validate()
    except ValueError as error:
        raise click.ClickException(str(error)) from error
    settings.configure_logging()


@employee_tasks.group()
def db() -> None:
    """Database commands."""


@db.command("init")
@click.option("--db-path", type=click.Path(path_type=Path), default=None, help="SQLite DB path.")
def db_init(db_path: Path | None) -> None:
    """Create or upgrade the schema."""

    _run(lambda: TASKS_CONTROLLER.init_db(DbInitCommand(db_path=db_path)))


@employee_tasks.group()
def employees() -> None:
    """Employee commands."""


@employees.command("seed")
@click.option("--db-path", type=click.Path(path_type=Path), default=None, help="SQLite DB path.")
@click.option("--emp-id", required=True, help="Numeric employee id.")
@click.option("--first-name", default="", help="Employee first name.")
@click.option("--last-name", default="", help="Employee last name.")
def employees_seed(db_path: Path | None, emp_id: str, first_name: str, last_name: str) -> None:
    """Provision an employee record with no tasks."""

    _run(
        lambda: TASKS_CONTROLLER.seed_employee(
            EmployeeSeedCommand(
                db_path=db_path,
                emp_id=emp_id,
                first_name=first_name,
                last_name=last_name,
            ),
        ),
    )


@employees.command("show")
@click.argument("emp_id")
@click.option("--db-path", type=click.Path(path_type=Path), default=None, help="SQLite DB path.")
def employees_show(emp_id: str, db_path: Path | None) -> None:
    """Print an employee document as JSON."""

    _run(lambda: TASKS_CONTROLLER.show_employee(EmployeeShowCommand(db_path=db_path, emp_id=emp_id)))


@employee_tasks.group()
def tasks() -> None:
    """Task list commands."""


@tasks.command("list")
@click.argument("emp_id")
@click.option("--db-path", type=click.Path(path_type=Path), default=None, help="SQLite DB path.")
def tasks_list(emp_id: str, db_path: Path | None) -> None:
    """Print the employee's todo and done lists as JSON."""

    _run(lambda: TASKS_CONTROLLER.list_tasks(TasksListCommand(db_path=db_path, emp_id=emp_id)))


@tasks.command("add")
@click.argument("emp_id")
@click.option("--db-path", type=click.Path(path_type=Path), default=None, help="SQLite DB path.")
@click.option("--text", default=None, help="Task text.")
@click.option(
    "--payload",
    "payload_json",
    default=None,
    help='Raw JSON payload, for example `{"text": "Buy milk"}`.',
)
def tasks_add(
    emp_id: str,
    db_path: Path | None,
    text: str | None,
    payload_json: str | None,
) -> None:
    """Append a task to the employee's todo list and print its id."""

    if (text is None) == (payload_json is None):
        raise click.UsageError("Pass exactly one of --text or --payload.")
    _run(
        lambda: TASKS_CONTROLLER.add_task(
            TasksAddCommand(
                db_path=db_path,
                emp_id=emp_id,
                text=text,
                payload_json=payload_json,
            ),
        ),
    )


def _run(action: Callable[[], CommandResult]) -> None:
    try:
        result = action()
    except ValueError as error:
        raise click.ClickException(str(error)) from error
    if not result.success:
        raise click.ClickException("\n".join(result.lines))
    _emit_lines(result.lines)


def _emit_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


if __name__ == "__main__":  # pragma: no cover
    employee_tasks()
