"""In-memory employee records."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List

from employee_manager.core.errors import NotFoundError, RangeError
from employee_manager.core.salary_policy import SalaryPolicy

logger = logging.getLogger(__name__)


@dataclass
class Employee:
    """A single employee record.

    The calculated salary is derived from the base salary and policy and is
    only ever set through EmployeeStore, which recomputes it on every change.
    """

    id: int
    name: str
    base_salary: Decimal
    policy: SalaryPolicy
    calculated_salary: Decimal


def _require_positive(base_salary: Decimal) -> None:
    if base_salary <= 0:
        raise RangeError(f"Base salary must be greater than zero, got {base_salary}")


class EmployeeStore:
    """Ordered collection of employee records with never-reused IDs."""

    def __init__(self) -> None:
        self._employees: List[Employee] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._employees)

    def is_empty(self) -> bool:
        return not self._employees

    def add(self, name: str, base_salary: Decimal, policy: SalaryPolicy) -> Employee:
        """Create a record and append it to the store.

        Args:
            name: Employee name, any text
            base_salary: Base salary, must be greater than zero
            policy: Salary policy used to compute the calculated salary

        Returns:
            The new record

        Raises:
            RangeError: If base_salary is not greater than zero
        """
        _require_positive(base_salary)

        employee = Employee(
            id=self._next_id,
            name=name,
            base_salary=base_salary,
            policy=policy,
            calculated_salary=policy.compute(base_salary),
        )
        self._next_id += 1
        self._employees.append(employee)
        logger.info("Added employee %d (%s, %s)", employee.id, employee.name, policy.label)
        return employee

    def list(self) -> List[Employee]:
        """Return all records in insertion order."""
        return list(self._employees)

    def find_by_id(self, employee_id: int) -> Employee:
        """Return the record with the given ID.

        Raises:
            NotFoundError: If no record has that ID
        """
        for employee in self._employees:
            if employee.id == employee_id:
                return employee
        raise NotFoundError(employee_id)

    def update_policy_and_base(
        self, employee_id: int, policy: SalaryPolicy, base_salary: Decimal
    ) -> Employee:
        """Replace a record's policy and base salary and recompute its salary.

        Args:
            employee_id: ID of the record to update
            policy: New salary policy
            base_salary: New base salary, must be greater than zero

        Returns:
            The updated record (same object, same ID)

        Raises:
            NotFoundError: If no record has that ID
            RangeError: If base_salary is not greater than zero
        """
        employee = self.find_by_id(employee_id)
        _require_positive(base_salary)

        employee.policy = policy
        employee.base_salary = base_salary
        employee.calculated_salary = policy.compute(base_salary)
        logger.info("Updated employee %d to %s, base %s", employee_id, policy.label, base_salary)
        return employee

    def remove(self, employee_id: int) -> Employee:
        """Delete a record. Remaining IDs and the ID counter are unchanged.

        Returns:
            The removed record

        Raises:
            NotFoundError: If no record has that ID
        """
        employee = self.find_by_id(employee_id)
        self._employees.remove(employee)
        logger.info("Removed employee %d (%s)", employee.id, employee.name)
        return employee
