"""Roster error hierarchy.

All store and record failures are RosterError subclasses so the CLI can
catch them in one place and show the message.
"""

from typing import Any, List, Optional


class RosterError(Exception):
    """Base class for all roster errors."""
    pass


class ValidationError(RosterError, ValueError):
    """Raised when a field value violates its constraint."""

    def __init__(self, message: str, field: Optional[str] = None, errors: Optional[List[str]] = None):
        self.field = field
        self.errors = errors or [message]
        super().__init__(message)


class InvalidSalaryError(ValidationError):
    """Raised when a salary is negative or not a finite number."""
    pass


class InvalidDepartmentError(ValidationError):
    """Raised when a department is missing or blank."""
    pass


class NotFoundError(RosterError, LookupError):
    """Raised when an employee ID is not in the store."""

    def __init__(self, employee_id: Any):
        self.employee_id = employee_id
        super().__init__(f"Employee with ID {employee_id} not found")


class ConfigError(RosterError):
    """Raised when settings.json holds invalid settings."""
    pass


class SeedError(RosterError):
    """Raised when a seed roster file cannot be loaded."""
    pass
