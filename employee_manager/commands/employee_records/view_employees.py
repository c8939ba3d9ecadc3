"""View Employees menu command."""

from employee_manager.commands.base import NO_EMPLOYEES_MESSAGE, BaseCommand
from employee_manager.commands.registry import register_command
from employee_manager.core.employee_store import Employee


def format_employee_line(employee: Employee) -> str:
    """Format a record for the employee list.

    The list shows the base salary as entered, not the calculated salary.
    """
    return f"ID: {employee.id} | Name: {employee.name} | Base Salary: ${employee.base_salary}\n"


class ViewEmployeesCommand(BaseCommand):
    """Command to list every employee record in the order they were added."""

    option = 2
    label = "View Employees"

    def validate(self) -> None:
        pass

    def execute(self) -> None:
        employees = self.store.list()
        if not employees:
            self.console.echo(NO_EMPLOYEES_MESSAGE)
            return

        self.console.echo("\n--- Employee List ---")
        for employee in employees:
            self.console.echo(format_employee_line(employee))


register_command(ViewEmployeesCommand)
