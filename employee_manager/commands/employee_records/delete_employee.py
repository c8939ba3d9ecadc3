"""Delete Employee menu command."""

from employee_manager.commands.base import BaseCommand
from employee_manager.commands.registry import register_command


class DeleteEmployeeCommand(BaseCommand):
    """Command to remove an employee record. Its ID is never handed out again."""

    option = 4
    label = "Delete Employee"

    def validate(self) -> None:
        self.require_employees()
        self.employee = self.read_employee("\nEnter Employee ID to delete: ")

    def execute(self) -> None:
        employee = self.store.remove(self.employee.id)
        self.console.echo(f"Employee {employee.name} (ID: {employee.id}) has been deleted.\n")


register_command(DeleteEmployeeCommand)
