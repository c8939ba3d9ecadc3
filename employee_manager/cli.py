"""CLI entry point for employee-manager."""

import logging

import click

from employee_manager.commands.registry import discover_and_register_commands
from employee_manager.core.console import Console
from employee_manager.core.employee_store import EmployeeStore
from employee_manager.core.interaction_loop import InteractionLoop

# Dynamically discover and import all command modules
discover_and_register_commands()


@click.command()
def main() -> None:
    """Employee Manager - keep employee records for the length of one session.

    Presents a numbered menu to add, list, update and delete employees.
    Records live in memory only and are gone once the program exits.
    """
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    InteractionLoop(EmployeeStore(), Console()).run()
