"""Typed field updates for stored employees.

Each update names exactly one Employee attribute and carries its new
value. The store applies them with EmployeeStore.apply(); callers that
only have a field name and a raw value (the CLI) go through
parse_update() first.

Usage:
    store.apply(1001, SetSalary(55000.0))
    store.apply(1001, parse_update("rating", 4.5))
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Type, Union

from .errors import ValidationError


@dataclass(frozen=True)
class SetName:
    value: str
    attribute: ClassVar[str] = "name"


@dataclass(frozen=True)
class SetDepartment:
    value: str
    attribute: ClassVar[str] = "department"


@dataclass(frozen=True)
class SetSalary:
    value: float
    attribute: ClassVar[str] = "salary"


@dataclass(frozen=True)
class SetRating:
    value: float
    attribute: ClassVar[str] = "performance_rating"


@dataclass(frozen=True)
class SetExperience:
    value: int
    attribute: ClassVar[str] = "years_of_experience"


@dataclass(frozen=True)
class SetActive:
    value: bool
    attribute: ClassVar[str] = "is_active"


FieldUpdate = Union[SetName, SetDepartment, SetSalary, SetRating, SetExperience, SetActive]

# Field names accepted by parse_update(), matched case-insensitively
UPDATE_FIELDS: Dict[str, Type[Any]] = {
    "name": SetName,
    "department": SetDepartment,
    "salary": SetSalary,
    "rating": SetRating,
    "experience": SetExperience,
    "active": SetActive,
}


def parse_update(field: str, value: Any) -> FieldUpdate:
    """Resolve a field name and raw value into a typed update.

    The value is not checked here; the Employee model validates it when
    the update is applied.

    Args:
        field: One of name, department, salary, rating, experience, active
        value: New value for the field

    Returns:
        The matching update

    Raises:
        ValidationError: If the field name is unknown
    """
    update_cls = UPDATE_FIELDS.get((field or "").strip().lower())
    if update_cls is None:
        raise ValidationError(f"Invalid field: {field}", field=field)
    return update_cls(value)
