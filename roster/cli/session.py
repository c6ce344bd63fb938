"""CLI session state: one store, its settings, and the employee ID sequence.

A session lives for one process. Running `roster list` builds a session,
prints, and exits; `roster shell` keeps a single session alive across
commands.
"""

import re
from pathlib import Path
from typing import Optional, Union

from roster.sdk import EmployeeStore, RosterSettings, load_seed

_INT_ID = re.compile(r"^-?\d+$")


def parse_employee_id(raw: str) -> Union[int, str]:
    """Interpret a command-line ID: digits become an int, anything else stays a string."""
    raw = raw.strip()
    return int(raw) if _INT_ID.match(raw) else raw


class Session:
    """Store and settings shared by the roster commands."""

    def __init__(self, settings: RosterSettings, store: Optional[EmployeeStore] = None):
        self.settings = settings
        self.store = store if store is not None else EmployeeStore()
        self._next_id = settings.first_employee_id

    @classmethod
    def from_settings(cls, settings: RosterSettings, seed_file: Optional[Union[str, Path]] = None) -> "Session":
        """Build a session, loading seed_file (or the configured seed file) if any."""
        store = EmployeeStore()
        seed = seed_file or settings.seed_file
        if seed:
            load_seed(seed, store)
        return cls(settings, store)

    def next_id(self) -> int:
        """Next free integer ID, starting at first_employee_id."""
        while self._next_id in self.store:
            self._next_id += 1
        employee_id = self._next_id
        self._next_id += 1
        return employee_id

    def resolve_department(self, department: str) -> Optional[str]:
        """Return the configured spelling of a department, or None if it isn't configured."""
        known = {d.lower(): d for d in self.settings.departments}
        return known.get(department.strip().lower())
