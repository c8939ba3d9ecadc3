"""Salary policies that derive a calculated salary from a base salary."""

from decimal import Decimal
from enum import Enum

from employee_manager.core.errors import RangeError

PERMANENT_BONUS_RATE = Decimal("0.20")


class SalaryPolicy(Enum):
    """How an employee's calculated salary is derived from the base salary.

    Each member carries the number used to pick it in the console and the
    label shown next to that number.
    """

    PERMANENT = (1, "Permanent")
    CONTRACT = (2, "Contract")

    def __init__(self, choice: int, label: str) -> None:
        self.choice = choice
        self.label = label

    def compute(self, base_salary: Decimal) -> Decimal:
        """Return the calculated salary for a base salary.

        Args:
            base_salary: The base amount before any bonus

        Returns:
            base_salary plus the permanent bonus, or base_salary unchanged
        """
        if self is SalaryPolicy.PERMANENT:
            return base_salary + base_salary * PERMANENT_BONUS_RATE
        return base_salary

    @classmethod
    def from_choice(cls, choice: int) -> "SalaryPolicy":
        """Look up a policy by its console choice number.

        Raises:
            RangeError: If no policy uses that number
        """
        for policy in cls:
            if policy.choice == choice:
                return policy
        raise RangeError(f"Unknown employee type choice: {choice}")
