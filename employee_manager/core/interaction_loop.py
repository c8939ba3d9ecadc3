"""Read-validate-dispatch-print loop behind the console menu."""

import logging
from typing import List, Optional, Tuple, Type

from employee_manager.commands.base import BaseCommand
from employee_manager.commands.registry import get_command, registered_commands
from employee_manager.core.console import Console
from employee_manager.core.employee_store import EmployeeStore
from employee_manager.core.errors import EmployeeManagerError
from employee_manager.utils.input_parsing import parse_int_in_range

logger = logging.getLogger(__name__)

MENU_HEADER = "\n--- Employee Management System ---"
MENU_PROMPT = "Choose an option: "


class InteractionLoop:
    """Runs menu commands against one store until a command ends the session.

    Args:
        store: The employee records for this session
        console: Where the menu is shown and answers are read
    """

    def __init__(self, store: EmployeeStore, console: Console) -> None:
        self.store = store
        self.console = console

    def run(self) -> None:
        """Show the menu and run the chosen command, over and over.

        Returns when a command ends the session or the input runs out.
        """
        try:
            while True:
                command_class = self.read_choice()
                if command_class is None:
                    continue
                command = command_class(self.store, self.console)
                self.run_command(command)
                if command.ends_session:
                    return
        except EOFError:
            logger.debug("Console input ended, leaving the menu loop")

    def read_choice(self) -> Optional[Type[BaseCommand]]:
        """Show the menu and return the chosen command class, or None."""
        commands = registered_commands()
        self.console.echo(MENU_HEADER)
        for command_class in commands:
            self.console.echo(f"{command_class.option}. {command_class.label}")

        answer = self.console.prompt(MENU_PROMPT)
        low, high = _option_bounds(commands)
        try:
            option = parse_int_in_range(answer, low, high)
        except EmployeeManagerError as e:
            logger.debug("Rejected menu choice %r: %s", answer, e)
            self.console.echo(f"Invalid choice. Please enter a number between {low} and {high}.")
            return None
        return get_command(option)

    def run_command(self, command: BaseCommand) -> None:
        """Validate then execute a command, printing the message of any failure."""
        try:
            command.validate()
            command.execute()
        except EmployeeManagerError as e:
            logger.debug("Aborted %r: %r", command.label, e.__cause__ or e)
            self.console.echo(str(e))


def _option_bounds(commands: List[Type[BaseCommand]]) -> Tuple[int, int]:
    options = [command_class.option for command_class in commands]
    return min(options), max(options)
