from __future__ import annotations

import json
from pathlib import Path

import allure
from click.testing import CliRunner

from employee_tasks.main import employee_tasks

pytestmark = [
    allure.epic("Task Lists"),
    allure.feature("CLI"),
]


def _seed(runner: CliRunner, db_path: Path, emp_id: str = "1007") -> None:
    result = runner.invoke(
        employee_tasks,
        [
            "employees",
            "seed",
            "--db-path",
            str(db_path),
            "--emp-id",
            emp_id,
            "--first-name",
            "Ada",
            "--last-name",
            "Lovelace",
        ],
    )
    assert result.exit_code == 0, result.output
    assert f"Employee provisioned: {emp_id}" in result.output


def test_db_init(tmp_path: Path) -> None:
    db_path = tmp_path / "cli.db"
    result = CliRunner().invoke(employee_tasks, ["db", "init", "--db-path", str(db_path)])

    assert result.exit_code == 0, result.output
    assert "Schema ready" in result.output
    assert db_path.exists()


def test_add_and_list_tasks(tmp_path: Path) -> None:
    db_path = tmp_path / "cli.db"
    runner = CliRunner()
    _seed(runner, db_path)

    empty = runner.invoke(employee_tasks, ["tasks", "list", "1007", "--db-path", str(db_path)])
    assert empty.exit_code == 1
    assert "Employee has no tasks" in empty.output

    added = runner.invoke(
        employee_tasks,
        ["tasks", "add", "1007", "--db-path", str(db_path), "--text", "Buy milk"],
    )
    assert added.exit_code == 0, added.output
    task_id = json.loads(added.output.strip())["id"]

    listed = runner.invoke(employee_tasks, ["tasks", "list", "1007", "--db-path", str(db_path)])
    assert listed.exit_code == 0, listed.output
    assert json.loads(listed.output.strip()) == {
        "empId": 1007,
        "todo": [{"id": task_id, "text": "Buy milk"}],
        "done": [],
    }


def test_add_with_raw_payload_reports_violations(tmp_path: Path) -> None:
    db_path = tmp_path / "cli.db"
    runner = CliRunner()
    _seed(runner, db_path)

    result = runner.invoke(
        employee_tasks,
        ["tasks", "add", "1007", "--db-path", str(db_path), "--payload", '{"text": 123}'],
    )

    assert result.exit_code == 1
    assert "Invalid task payload" in result.output
    assert "wrong_type" in result.output


def test_add_rejects_malformed_json(tmp_path: Path) -> None:
    db_path = tmp_path / "cli.db"
    runner = CliRunner()
    _seed(runner, db_path)

    result = runner.invoke(
        employee_tasks,
        ["tasks", "add", "1007", "--db-path", str(db_path), "--payload", "{not json"],
    )

    assert result.exit_code == 1
    assert "not valid JSON" in result.output


def test_add_requires_exactly_one_payload_option(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        employee_tasks,
        ["tasks", "add", "1007", "--db-path", str(tmp_path / "cli.db")],
    )

    assert result.exit_code == 2


def test_add_to_unknown_employee(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        employee_tasks,
        ["tasks", "add", "9999", "--db-path", str(tmp_path / "cli.db"), "--text", "x"],
    )

    assert result.exit_code == 1
    assert "Employee not found" in result.output


def test_non_numeric_employee_id(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        employee_tasks,
        ["tasks", "list", "foo", "--db-path", str(tmp_path / "cli.db")],
    )

    assert result.exit_code == 1
    assert "Input must be a number" in result.output


def test_show_employee(tmp_path: Path) -> None:
    db_path = tmp_path / "cli.db"
    runner = CliRunner()
    _seed(runner, db_path)

    result = runner.invoke(employee_tasks, ["employees", "show", "1007", "--db-path", str(db_path)])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output.strip())
    assert payload["empId"] == 1007
    assert payload["firstName"] == "Ada"


def test_seed_duplicate_employee_conflicts(tmp_path: Path) -> None:
    db_path = tmp_path / "cli.db"
    runner = CliRunner()
    _seed(runner, db_path)

    result = runner.invoke(
        employee_tasks,
        ["employees", "seed", "--db-path", str(db_path), "--emp-id", "1007"],
    )

    assert result.exit_code == 1
    assert "already exists" in result.output


def test_invalid_env_settings_fail_fast(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("EMPLOYEE_TASKS_BUSY_TIMEOUT_MS", "0")

    result = CliRunner().invoke(
        employee_tasks,
        ["tasks", "list", "1007", "--db-path", str(tmp_path / "cli.db")],
    )

    assert result.exit_code == 1
    assert "must be > 0" in result.output


def test_employee_id_beyond_storage_range_is_not_found(tmp_path: Path) -> None:
    db_path = tmp_path / "cli.db"
    runner = CliRunner()

    listed = runner.invoke(
        employee_tasks,
        ["tasks", "list", "99999999999999999999", "--db-path", str(db_path)],
    )
    added = runner.invoke(
        employee_tasks,
        ["tasks", "add", "99999999999999999999", "--db-path", str(db_path), "--text", "x"],
    )

    assert listed.exit_code == 1
    assert not isinstance(listed.exception, OverflowError)
    assert "(404) Employee has no tasks" in listed.output
    assert added.exit_code == 1
    assert not isinstance(added.exception, OverflowError)
    assert "(404) Employee not found" in added.output
