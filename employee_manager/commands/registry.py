"""Command registry for menu dispatch."""

import importlib
import pkgutil
from pathlib import Path
from typing import Dict, List, Type

from employee_manager.commands.base import BaseCommand

_registry: Dict[int, Type[BaseCommand]] = {}


def register_command(command_class: Type[BaseCommand]) -> None:
    """Register a command class under its menu option.

    Args:
        command_class: The command class to register

    Raises:
        ValueError: If command_class lacks an option or label, or its option
            is already taken by another command
    """
    for attribute in ("option", "label"):
        if not hasattr(command_class, attribute):
            raise ValueError(
                f"Command class {command_class.__name__} must have a '{attribute}' attribute"
            )
    existing = _registry.get(command_class.option)
    if existing is not None and existing is not command_class:
        raise ValueError(
            f"Menu option {command_class.option} is already used by {existing.__name__}"
        )
    _registry[command_class.option] = command_class


def get_command(option: int) -> Type[BaseCommand]:
    """Get a command class by menu option.

    Raises:
        ValueError: If no command is registered for the option
    """
    if option not in _registry:
        raise ValueError(f"Unknown menu option: {option}")
    return _registry[option]


def registered_commands() -> List[Type[BaseCommand]]:
    """Return all registered command classes ordered by menu option."""
    return [_registry[option] for option in sorted(_registry)]


def discover_and_register_commands() -> None:
    """Import every command module below the commands package.

    Each module calls register_command() at import time, so importing the
    modules is enough to fill the registry.
    """
    commands_dir = Path(__file__).parent

    for category_dir in commands_dir.iterdir():
        if category_dir.is_dir() and not category_dir.name.startswith("_"):
            package_name = f"employee_manager.commands.{category_dir.name}"
            for module_info in pkgutil.iter_modules([str(category_dir)]):
                if not module_info.name.startswith("_"):
                    importlib.import_module(f"{package_name}.{module_info.name}")
