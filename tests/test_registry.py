"""Tests for the menu command registry."""

import pytest

from employee_manager.commands import registry
from employee_manager.commands.base import BaseCommand
from employee_manager.commands.employee_records.add_employee import AddEmployeeCommand
from employee_manager.commands.session.exit_program import ExitCommand


class _Command(BaseCommand):
    option = 7
    label = "Seven"

    def validate(self) -> None:
        pass

    def execute(self) -> None:
        pass


class TestDiscoveredCommands:
    """Tests against the commands found by discover_and_register_commands()."""

    def test_menu_labels_in_order(self) -> None:
        assert [(c.option, c.label) for c in registry.registered_commands()] == [
            (1, "Add Employee"),
            (2, "View Employees"),
            (3, "Update Employee Salary Type and Base Salary"),
            (4, "Delete Employee"),
            (5, "Exit"),
        ]

    def test_get_command(self) -> None:
        assert registry.get_command(1) is AddEmployeeCommand
        assert registry.get_command(5) is ExitCommand

    def test_only_exit_ends_session(self) -> None:
        assert [c.option for c in registry.registered_commands() if c.ends_session] == [5]

    def test_discovery_is_repeatable(self) -> None:
        registry.discover_and_register_commands()

        assert len(registry.registered_commands()) == 5


class TestRegisterCommand:
    """Tests for register_command() and get_command() on an empty registry."""

    @pytest.fixture(autouse=True)
    def _empty_registry(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(registry, "_registry", {})

    def test_register_and_get(self) -> None:
        registry.register_command(_Command)

        assert registry.get_command(7) is _Command

    def test_registering_twice_is_allowed(self) -> None:
        registry.register_command(_Command)
        registry.register_command(_Command)

        assert registry.registered_commands() == [_Command]

    def test_option_already_taken(self) -> None:
        class OtherCommand(_Command):
            label = "Other"

        registry.register_command(_Command)

        with pytest.raises(ValueError, match="Menu option 7 is already used by _Command"):
            registry.register_command(OtherCommand)

    def test_missing_label(self) -> None:
        class NoLabelCommand(BaseCommand):
            option = 8

            def validate(self) -> None:
                pass

            def execute(self) -> None:
                pass

        with pytest.raises(ValueError, match="must have a 'label' attribute"):
            registry.register_command(NoLabelCommand)

    def test_unknown_option(self) -> None:
        with pytest.raises(ValueError, match="Unknown menu option: 9"):
            registry.get_command(9)
