"""Exceptions raised while handling console input and employee records."""


class EmployeeManagerError(Exception):
    """Base class for errors that abort the current menu flow."""


class ParseError(EmployeeManagerError, ValueError):
    """Raised when console input is not a well-formed number."""


class RangeError(EmployeeManagerError, ValueError):
    """Raised when a number falls outside the values allowed for it."""


class NotFoundError(EmployeeManagerError, LookupError):
    """Raised when no employee record has the requested ID."""

    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(f"No employee with ID {employee_id}")


class FlowAbortedError(EmployeeManagerError):
    """Raised by a command to abort its flow with a message for the user."""
