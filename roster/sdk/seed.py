"""Load a roster from a YAML seed file.

A seed file is either a list of employees or a mapping with an
"employees" list:

    employees:
      - id: 1000
        name: Jane Smith
        department: HR
        salary: 60000
        rating: 4.0
        experience: 3
        active: true      # optional, defaults to true

Seed files are read once at startup. The store is never written back.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .errors import SeedError, ValidationError
from .schemas import Employee
from .store import EmployeeStore

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("id", "name", "department", "salary", "rating", "experience")


def employee_from_entry(entry: Dict[str, Any]) -> Employee:
    """Build an Employee from a seed entry using the short field names.

    Raises:
        ValidationError: If a key is missing or a value is invalid
    """
    missing = [k for k in REQUIRED_KEYS if k not in entry]
    if missing:
        raise ValidationError(f"Missing keys: {', '.join(missing)}")

    unknown = sorted(set(entry) - set(REQUIRED_KEYS) - {"active"})
    if unknown:
        raise ValidationError(f"Unknown keys: {', '.join(unknown)}")

    return Employee(
        employee_id=entry["id"],
        name=entry["name"],
        department=entry["department"],
        salary=entry["salary"],
        performance_rating=entry["rating"],
        years_of_experience=entry["experience"],
        is_active=entry.get("active", True),
    )


def _read_entries(path: Path) -> List[Any]:
    """Read the raw employee entries from a seed file."""
    if not path.exists():
        raise SeedError(f"Seed file not found: {path}")

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SeedError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("employees") or []
    if not isinstance(data, list):
        raise SeedError(f"Seed file must hold a list of employees: {path}")
    return data


def load_seed(
    path: Union[str, Path],
    store: Optional[EmployeeStore] = None,
) -> EmployeeStore:
    """Load employees from a seed file into a store.

    Entries are added in file order; a later entry with the same ID
    replaces an earlier one.

    Args:
        path: Path to the YAML seed file
        store: Store to add to (a new one is created if omitted)

    Returns:
        The store holding the seeded employees

    Raises:
        SeedError: If the file can't be read or an entry is invalid.
            Nothing is added when any entry fails.
    """
    path = Path(path).expanduser()
    entries = _read_entries(path)

    employees = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise SeedError(f"{path} entry {index}: expected a mapping, got {type(entry).__name__}")
        try:
            employees.append(employee_from_entry(entry))
        except ValidationError as e:
            raise SeedError(f"{path} entry {index}: {e}") from e

    if store is None:
        store = EmployeeStore()
    for employee in employees:
        store.add(employee)

    logger.info(f"Loaded {len(employees)} employee(s) from {path}")
    return store
