import allure
from click.testing import CliRunner

from employee_tasks import __version__
from employee_tasks.main import employee_tasks

pytestmark = [
    allure.epic("Task Lists"),
    allure.feature("CLI"),
]


def test_version():
    assert __version__


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(employee_tasks, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
