"""Employee Manager - console employee record manager."""

__version__ = "0.1.0"
