"""Exit menu command."""

from employee_manager.commands.base import BaseCommand
from employee_manager.commands.registry import register_command


class ExitCommand(BaseCommand):
    """Command that ends the console session."""

    option = 5
    label = "Exit"
    ends_session = True

    def validate(self) -> None:
        pass

    def execute(self) -> None:
        self.console.echo("Exiting program...")


register_command(ExitCommand)
