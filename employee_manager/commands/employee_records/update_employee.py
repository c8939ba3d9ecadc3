"""Update Employee Salary Type and Base Salary menu command."""

from employee_manager.commands.base import BaseCommand
from employee_manager.commands.registry import register_command


class UpdateEmployeeCommand(BaseCommand):
    """Command to replace an employee's salary policy and base salary.

    All three answers (ID, base salary, type) are checked before the store
    is touched, so a bad type choice leaves the record unchanged even though
    the new base salary was already accepted.
    """

    option = 3
    label = "Update Employee Salary Type and Base Salary"

    def validate(self) -> None:
        self.require_employees()
        self.employee = self.read_employee("\nEnter Employee ID to update: ")
        self.console.echo(f"Updating {self.employee.name}'s salary type and base salary...")
        self.base_salary = self.read_base_salary("\nEnter new base salary: ")
        self.policy = self.read_policy("Select new Employee Type:")

    def execute(self) -> None:
        employee = self.store.update_policy_and_base(
            self.employee.id, self.policy, self.base_salary
        )
        self.console.echo(f"Salary type and base salary updated for {employee.name}.\n")


register_command(UpdateEmployeeCommand)
