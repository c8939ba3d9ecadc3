"""Add Employee menu command."""

from employee_manager.commands.base import BaseCommand
from employee_manager.commands.registry import register_command


class AddEmployeeCommand(BaseCommand):
    """Command to create a new employee record."""

    option = 1
    label = "Add Employee"

    def validate(self) -> None:
        self.name = self.console.prompt("\nEnter employee name: ")
        self.base_salary = self.read_base_salary("\nEnter base salary: ")
        self.policy = self.read_policy("Select Employee Type:")

    def execute(self) -> None:
        self.store.add(self.name, self.base_salary, self.policy)
        self.console.echo("Employee added successfully!\n")


register_command(AddEmployeeCommand)
