"""Base class for all menu commands."""

from abc import ABC, abstractmethod
from decimal import Decimal

from employee_manager.core.console import Console
from employee_manager.core.employee_store import Employee, EmployeeStore
from employee_manager.core.errors import EmployeeManagerError, FlowAbortedError
from employee_manager.core.salary_policy import SalaryPolicy
from employee_manager.utils.input_parsing import parse_int, parse_positive_decimal

NO_EMPLOYEES_MESSAGE = "\nNo employees found.\n"
INVALID_ID_MESSAGE = "Invalid ID. Please enter a valid Employee ID."
INVALID_SALARY_MESSAGE = "Invalid input. Enter a valid base salary."
INVALID_TYPE_MESSAGE = "Invalid choice. Please enter 1 for Permanent or 2 for Contract."


class BaseCommand(ABC):
    """Base class for all menu commands.

    A command is run in two steps: validate() reads and checks every answer
    it needs without touching the store, then execute() applies the change
    and reports it. Any EmployeeManagerError raised by either step aborts the
    command and leaves the store as it was.
    """

    option: int  # e.g., 1
    label: str  # e.g., "Add Employee"
    ends_session = False

    def __init__(self, store: EmployeeStore, console: Console):
        """Initialize the command.

        Args:
            store: The employee records the command works on
            console: Where the command reads answers and writes results
        """
        self.store = store
        self.console = console

    @abstractmethod
    def validate(self) -> None:
        """Read and check the command's input.

        Raises:
            EmployeeManagerError: If any answer is invalid
        """
        pass

    @abstractmethod
    def execute(self) -> None:
        """Apply the command to the store and print the outcome."""
        pass

    def require_employees(self) -> None:
        """Abort the command when there are no records to work on.

        Raises:
            FlowAbortedError: If the store is empty
        """
        if self.store.is_empty():
            raise FlowAbortedError(NO_EMPLOYEES_MESSAGE)

    def read_employee(self, prompt: str) -> Employee:
        """Ask for an employee ID and return the matching record.

        Raises:
            FlowAbortedError: If the answer is not the ID of a record
        """
        answer = self.console.prompt(prompt)
        try:
            return self.store.find_by_id(parse_int(answer))
        except EmployeeManagerError as e:
            raise FlowAbortedError(INVALID_ID_MESSAGE) from e

    def read_base_salary(self, prompt: str) -> Decimal:
        """Ask for a base salary greater than zero.

        Raises:
            FlowAbortedError: If the answer is not a positive number
        """
        answer = self.console.prompt(prompt)
        try:
            return parse_positive_decimal(answer)
        except EmployeeManagerError as e:
            raise FlowAbortedError(INVALID_SALARY_MESSAGE) from e

    def read_policy(self, heading: str) -> SalaryPolicy:
        """Show the employee types under a heading and return the chosen one.

        Raises:
            FlowAbortedError: If the answer is not one of the listed numbers
        """
        choices = "\n".join(f"{policy.choice}. {policy.label}" for policy in SalaryPolicy)
        answer = self.console.prompt(f"{heading}\n{choices}", nl=True)
        try:
            return SalaryPolicy.from_choice(parse_int(answer))
        except EmployeeManagerError as e:
            raise FlowAbortedError(INVALID_TYPE_MESSAGE) from e
