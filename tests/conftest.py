"""Pytest configuration and shared fixtures for employee-manager tests."""

import io
from decimal import Decimal

import pytest

from employee_manager.commands.registry import discover_and_register_commands
from employee_manager.core.console import Console
from employee_manager.core.employee_store import EmployeeStore
from employee_manager.core.interaction_loop import InteractionLoop
from employee_manager.core.salary_policy import SalaryPolicy

discover_and_register_commands()

MENU = (
    "\n--- Employee Management System ---\n"
    "1. Add Employee\n"
    "2. View Employees\n"
    "3. Update Employee Salary Type and Base Salary\n"
    "4. Delete Employee\n"
    "5. Exit\n"
    "Choose an option: "
)


def scripted_console(*answers: str) -> Console:
    """Build a Console that reads the given answers, one per line."""
    return Console(io.StringIO("".join(f"{answer}\n" for answer in answers)))


@pytest.fixture
def store() -> EmployeeStore:
    return EmployeeStore()


@pytest.fixture
def populated_store() -> EmployeeStore:
    """Store holding Alice (ID 1, permanent) and Bob (ID 2, contract)."""
    store = EmployeeStore()
    store.add("Alice", Decimal("1000"), SalaryPolicy.PERMANENT)
    store.add("Bob", Decimal("500"), SalaryPolicy.CONTRACT)
    return store


class ConsoleSessionTestBase:
    """Base class for tests that drive the menu loop with scripted answers.

    Usage:
        class TestAddFlow(ConsoleSessionTestBase):
            def test_adds_employee(self):
                output = self.run_session("1", "Alice", "1000", "1", "5")
                assert "Employee added successfully!" in output

    Each test starts with an empty self.store. run_session() feeds the
    answers to the loop and returns everything it printed. Answers may stop
    before "5"; the loop then ends at the end of the input.
    """

    @pytest.fixture(autouse=True)
    def _setup_session(self, capsys: pytest.CaptureFixture[str]) -> None:
        self.store = EmployeeStore()
        self.capsys = capsys

    def run_session(self, *answers: str) -> str:
        InteractionLoop(self.store, scripted_console(*answers)).run()
        return self.capsys.readouterr().out

    def add_employee(self, name: str, base_salary: str, policy: SalaryPolicy) -> None:
        """Add a record directly to the store, bypassing the console."""
        self.store.add(name, Decimal(base_salary), policy)
