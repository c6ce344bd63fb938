"""Roster SDK - Employee records, the in-memory store, and configuration."""

from .errors import (
    RosterError,
    ValidationError,
    InvalidSalaryError,
    InvalidDepartmentError,
    NotFoundError,
    ConfigError,
    SeedError,
)

from .schemas import (
    Employee,
    experience_key,
)

from .updates import (
    FieldUpdate,
    SetName,
    SetDepartment,
    SetSalary,
    SetRating,
    SetExperience,
    SetActive,
    UPDATE_FIELDS,
    parse_update,
)

from .store import EmployeeStore

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    unset_setting,
    validate_settings,
    load_roster_settings,
    RosterSettings,
    DEFAULT_DEPARTMENTS,
)

from .seed import (
    load_seed,
    employee_from_entry,
)

__all__ = [
    # Errors
    "RosterError",
    "ValidationError",
    "InvalidSalaryError",
    "InvalidDepartmentError",
    "NotFoundError",
    "ConfigError",
    "SeedError",
    # Records
    "Employee",
    "experience_key",
    # Field updates
    "FieldUpdate",
    "SetName",
    "SetDepartment",
    "SetSalary",
    "SetRating",
    "SetExperience",
    "SetActive",
    "UPDATE_FIELDS",
    "parse_update",
    # Store
    "EmployeeStore",
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "unset_setting",
    "validate_settings",
    "load_roster_settings",
    "RosterSettings",
    "DEFAULT_DEPARTMENTS",
    # Seed files
    "load_seed",
    "employee_from_entry",
]
