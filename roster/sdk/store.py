"""In-memory employee store.

EmployeeStore owns every Employee it holds. Records go in as copies and
come out as copies, so the only way to change a stored record is
through the store's own mutation methods (add, remove, update, apply,
give_raise), each of which either completes or leaves the store
untouched.

Ordering:
    Queries return records in insertion order (the order IDs were first
    added; overwriting an ID keeps its position). Sorts are stable, so
    records with equal keys keep that order.
"""

import logging
from typing import Dict, Generic, Hashable, Iterator, List, Optional, TypeVar, get_args

from .errors import NotFoundError, ValidationError
from .schemas import Employee, experience_key
from .updates import FieldUpdate, parse_update

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)

_UPDATE_TYPES = get_args(FieldUpdate)


class EmployeeStore(Generic[K]):
    """Keyed collection of employees with search, sort and pay reports."""

    def __init__(self) -> None:
        self._employees: Dict[K, Employee] = {}

    # =========================================================================
    # Container protocol
    # =========================================================================

    def __len__(self) -> int:
        return len(self._employees)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._employees

    def __iter__(self) -> Iterator[Employee]:
        return iter(self.get_all())

    # =========================================================================
    # Mutations
    # =========================================================================

    def add(self, employee: Employee) -> None:
        """Insert an employee, replacing any existing one with the same ID.

        Raises:
            ValidationError: If employee is None or not an Employee
        """
        if employee is None:
            raise ValidationError("Employee cannot be null")
        if not isinstance(employee, Employee):
            raise ValidationError(f"Expected an Employee, got {type(employee).__name__}")

        replaced = employee.employee_id in self._employees
        self._employees[employee.employee_id] = employee.model_copy()
        logger.debug(f"{'Replaced' if replaced else 'Added'} employee {employee.employee_id}")

    def remove(self, employee_id: K) -> Employee:
        """Remove an employee by ID and return it.

        Raises:
            NotFoundError: If no employee has this ID
        """
        if employee_id not in self._employees:
            raise NotFoundError(employee_id)
        removed = self._employees.pop(employee_id)
        logger.debug(f"Removed employee {employee_id}")
        return removed

    def apply(self, employee_id: K, update: FieldUpdate) -> Employee:
        """Apply one typed field update and return the updated employee.

        Raises:
            NotFoundError: If no employee has this ID
            ValidationError: If the new value is rejected; the employee is unchanged
        """
        employee = self._employees.get(employee_id)
        if employee is None:
            raise NotFoundError(employee_id)
        if not isinstance(update, _UPDATE_TYPES):
            raise ValidationError(f"Unsupported update: {update!r}")

        setattr(employee, update.attribute, update.value)
        logger.debug(f"Set {update.attribute} of employee {employee_id} to {update.value!r}")
        return employee.model_copy()

    def update(self, employee_id: K, field: str, value: object) -> Employee:
        """Set one field by name.

        Field names are name, department, salary, rating, experience and
        active (case-insensitive).

        Raises:
            NotFoundError: If no employee has this ID
            ValidationError: If the field is unknown or the value is rejected
        """
        if employee_id not in self._employees:
            raise NotFoundError(employee_id)
        return self.apply(employee_id, parse_update(field, value))

    def give_raise(self, min_rating: float, amount: float) -> List[Employee]:
        """Add amount to the salary of everyone rated min_rating or higher.

        All-or-nothing: if any resulting salary is invalid, no salary changes.

        Returns:
            The raised employees, after the raise

        Raises:
            ValidationError: If a resulting salary fails validation
        """
        raised = [
            e.model_copy() for e in self._employees.values()
            if e.performance_rating >= min_rating
        ]
        for employee in raised:
            employee.salary = employee.salary + amount

        for employee in raised:
            self._employees[employee.employee_id] = employee

        logger.info(f"Raise of ${amount:.2f} applied to {len(raised)} employee(s) with rating >= {min_rating:.1f}")
        return [e.model_copy() for e in raised]

    # =========================================================================
    # Lookups and searches
    # =========================================================================

    def get(self, employee_id: K) -> Employee:
        """Get a copy of one employee.

        Raises:
            NotFoundError: If no employee has this ID
        """
        employee = self._employees.get(employee_id)
        if employee is None:
            raise NotFoundError(employee_id)
        return employee.model_copy()

    def get_all(self) -> List[Employee]:
        """Copies of all employees in insertion order."""
        return [e.model_copy() for e in self._employees.values()]

    def search_by_department(self, department: Optional[str]) -> List[Employee]:
        """Employees whose department equals department, ignoring case."""
        if not department or not department.strip():
            return []
        target = department.lower()
        return [e for e in self.get_all() if e.department.lower() == target]

    def search_by_name(self, name: Optional[str]) -> List[Employee]:
        """Employees whose name contains name, ignoring case."""
        if not name or not name.strip():
            return []
        term = name.lower()
        return [e for e in self.get_all() if term in e.name.lower()]

    def search(self, query: Optional[str]) -> List[Employee]:
        """Match query against name, department or ID (substring, ignoring case)."""
        if not query or not query.strip():
            return []
        term = query.lower()
        return [
            e for e in self.get_all()
            if term in e.name.lower()
            or term in e.department.lower()
            or term in str(e.employee_id).lower()
        ]

    def filter_by_performance(self, min_rating: float) -> List[Employee]:
        """Employees rated min_rating or higher."""
        return [e for e in self.get_all() if e.performance_rating >= min_rating]

    def filter_by_salary_range(self, low: float, high: float) -> List[Employee]:
        """Employees with low <= salary <= high."""
        return [e for e in self.get_all() if low <= e.salary <= high]

    def departments(self) -> List[str]:
        """Distinct department names, sorted."""
        return sorted({e.department for e in self._employees.values()})

    # =========================================================================
    # Sorting and reports
    # =========================================================================

    def sort_by_salary(self) -> List[Employee]:
        """All employees, highest salary first."""
        return sorted(self.get_all(), key=lambda e: e.salary, reverse=True)

    def sort_by_performance(self) -> List[Employee]:
        """All employees, highest rating first."""
        return sorted(self.get_all(), key=lambda e: e.performance_rating, reverse=True)

    def sort_by_experience(self) -> List[Employee]:
        """All employees, most experienced first."""
        return sorted(self.get_all(), key=experience_key, reverse=True)

    def get_top_paid(self, limit: int) -> List[Employee]:
        """The limit highest-paid employees, highest first.

        Raises:
            ValidationError: If limit is negative
        """
        if limit < 0:
            raise ValidationError(f"Limit cannot be negative: {limit}")
        return self.sort_by_salary()[:limit]

    def get_average_salary(self, department: Optional[str]) -> float:
        """Mean salary for a department (ignoring case), or 0.0 if nobody matches."""
        salaries = [e.salary for e in self.search_by_department(department)]
        if not salaries:
            return 0.0
        return sum(salaries) / len(salaries)
