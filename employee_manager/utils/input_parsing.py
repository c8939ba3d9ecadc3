"""Parsing and range checks for numbers typed at the console."""

from decimal import Decimal, InvalidOperation

from employee_manager.core.errors import ParseError, RangeError

# Largest magnitude a typed amount may have (96-bit integer limit).
MAX_DECIMAL = Decimal("79228162514264337593543950335")


def parse_int(text: str) -> int:
    """Parse an integer, ignoring surrounding whitespace.

    Raises:
        ParseError: If text is not a plain integer
    """
    stripped = text.strip()
    if "_" in stripped:
        raise ParseError(f"Not an integer: {text!r}")
    try:
        return int(stripped)
    except ValueError as e:
        raise ParseError(f"Not an integer: {text!r}") from e


def parse_int_in_range(text: str, low: int, high: int) -> int:
    """Parse an integer and require low <= value <= high.

    Raises:
        ParseError: If text is not an integer
        RangeError: If the value is outside the range
    """
    value = parse_int(text)
    if not low <= value <= high:
        raise RangeError(f"{value} is not between {low} and {high}")
    return value


def parse_decimal(text: str) -> Decimal:
    """Parse a plain decimal number, ignoring surrounding whitespace.

    Exponent notation is not accepted, and neither are amounts larger in
    magnitude than MAX_DECIMAL.

    Raises:
        ParseError: If text is not a plain decimal number within range
    """
    stripped = text.strip()
    if "_" in stripped or "e" in stripped.lower():
        raise ParseError(f"Not a number: {text!r}")
    try:
        value = Decimal(stripped)
    except InvalidOperation as e:
        raise ParseError(f"Not a number: {text!r}") from e
    if not value.is_finite():
        raise ParseError(f"Not a number: {text!r}")
    if abs(value) > MAX_DECIMAL:
        raise ParseError(f"Number too large: {text!r}")
    return value


def parse_positive_decimal(text: str) -> Decimal:
    """Parse a decimal number that must be greater than zero.

    Raises:
        ParseError: If text is not a finite decimal number
        RangeError: If the value is zero or negative
    """
    value = parse_decimal(text)
    if value <= 0:
        raise RangeError(f"{value} is not greater than zero")
    return value
