"""Pydantic schemas for roster data validation.

The Employee model validates on construction and on every attribute
assignment. Assignment is validate-then-assign, so a rejected value
leaves the previous one in place. Types are strict: strings are never
coerced to numbers and bools are never accepted as numbers.

pydantic's ValidationError does not leave this module; it is translated
to roster.sdk.errors.ValidationError (or a field-specific subclass).
"""

import math
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import InvalidDepartmentError, InvalidSalaryError, ValidationError


# Error class raised for a failing field; anything else is a plain ValidationError
_FIELD_ERRORS = {
    "salary": InvalidSalaryError,
    "department": InvalidDepartmentError,
}


def _translate(exc: PydanticValidationError) -> ValidationError:
    """Convert a pydantic ValidationError into a roster ValidationError.

    Messages raised by our own validators are passed through unchanged.
    Strict type failures become "Invalid type for field <name>".
    """
    messages: List[str] = []
    first_field = None

    for err in exc.errors():
        field = str(err["loc"][0]) if err.get("loc") else None
        if first_field is None:
            first_field = field

        if err["type"] == "value_error":
            messages.append(str(err["ctx"]["error"]))
        elif err["type"] == "frozen_field":
            messages.append(f"Field {field} cannot be changed.")
        elif err["type"] == "missing":
            messages.append(f"Field {field} is required.")
        else:
            messages.append(f"Invalid type for field {field}: {err['msg']}")

    error_cls = _FIELD_ERRORS.get(first_field, ValidationError)
    return error_cls("; ".join(messages), field=first_field, errors=messages)


class Employee(BaseModel):
    """One employee's attributes, keyed by an immutable ID.

    Two employees are equal when their IDs are equal, whatever their other
    fields hold. Sorting a list of employees puts the most experienced
    first.
    """

    model_config = ConfigDict(extra="forbid", strict=True, validate_assignment=True)

    employee_id: Any = Field(..., frozen=True, description="Unique, hashable employee key")
    name: str = Field(..., description="Full name")
    department: str = Field(..., description="Department name, matched case-insensitively")
    salary: float = Field(..., description="Annual salary")
    performance_rating: float = Field(..., description="Rating from 0 to 5")
    years_of_experience: int = Field(..., description="Whole years of experience")
    is_active: bool = Field(default=True, description="Currently employed")

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            raise _translate(e) from e

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except PydanticValidationError as e:
            raise _translate(e) from e

    # -------------------------------------------------------------------------
    # Field validators
    # -------------------------------------------------------------------------

    @field_validator("employee_id")
    @classmethod
    def check_employee_id(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Employee ID cannot be null.")
        try:
            hash(v)
        except TypeError:
            raise ValueError(f"Employee ID must be hashable, got {type(v).__name__}.")
        return v

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name cannot be empty.")
        return v

    @field_validator("department")
    @classmethod
    def check_department(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Department cannot be empty.")
        return v

    @field_validator("salary")
    @classmethod
    def check_salary(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("Salary must be a finite number.")
        if v < 0:
            raise ValueError("Salary cannot be negative.")
        return float(v)

    @field_validator("performance_rating")
    @classmethod
    def check_performance_rating(cls, v: float) -> float:
        if math.isnan(v) or v < 0 or v > 5:
            raise ValueError("Performance rating must be between 0 and 5.")
        return float(v)

    @field_validator("years_of_experience")
    @classmethod
    def check_years_of_experience(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Years of experience cannot be negative.")
        return v

    # -------------------------------------------------------------------------
    # Identity and ordering
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Employee):
            return NotImplemented
        return self.employee_id == other.employee_id

    def __hash__(self) -> int:
        return hash(self.employee_id)

    def __lt__(self, other: object) -> bool:
        """Higher experience sorts first."""
        if not isinstance(other, Employee):
            return NotImplemented
        return self.years_of_experience > other.years_of_experience

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def describe(self) -> str:
        """One-line human-readable summary."""
        return (
            f"{self.employee_id} | {self.name} | {self.department} | "
            f"${self.salary:.2f} | Rating: {self.performance_rating:.1f} | "
            f"Exp: {self.years_of_experience} yrs | "
            f"Active: {'Yes' if self.is_active else 'No'}"
        )

    def __str__(self) -> str:
        return self.describe()

    def to_dict(self) -> Dict[str, Any]:
        """Field values keyed by the short names used in seed files and JSON output."""
        return {
            "id": self.employee_id,
            "name": self.name,
            "department": self.department,
            "salary": self.salary,
            "rating": self.performance_rating,
            "experience": self.years_of_experience,
            "active": self.is_active,
        }


def experience_key(employee: Employee) -> int:
    """Sort key matching Employee's natural order (use with reverse=True)."""
    return employee.years_of_experience
