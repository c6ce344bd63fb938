"""Employee commands: one command per store operation.

The same group serves the top-level CLI (`roster list`) and the
interactive shell (`roster> list`), so every command takes the Session
from the click context rather than building its own store.
"""

import json
from contextlib import contextmanager
from typing import Any, List, Optional

import click
from rich.console import Console

from roster.sdk import Employee, RosterError
from .renderers.employee_renderer import render_departments, render_employees
from .session import Session, parse_employee_id

pass_session = click.make_pass_decorator(Session)

_TRUE_WORDS = {"yes", "y", "true", "1", "on"}
_FALSE_WORDS = {"no", "n", "false", "0", "off"}


@contextmanager
def store_errors():
    """Turn store errors into click errors so the user sees the message."""
    try:
        yield
    except RosterError as e:
        raise click.ClickException(str(e))


def parse_field_value(field: str, raw: str) -> Any:
    """Convert a command-line value to the type its field expects.

    Unknown field names pass through as strings; the store rejects them.

    Raises:
        click.BadParameter: If the value can't be converted
    """
    field = field.strip().lower()
    try:
        if field in ("salary", "rating"):
            return float(raw)
        if field == "experience":
            return int(raw)
    except ValueError:
        raise click.BadParameter(f"Invalid type for field {field}: {raw!r}", param_hint="VALUE")

    if field == "active":
        word = raw.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise click.BadParameter(f"Invalid type for field active: {raw!r} (use yes/no)", param_hint="VALUE")

    return raw


def _emit(employees: List[Employee], output_format: str, title: Optional[str] = None,
          empty_message: str = "No employees found.") -> None:
    """Print employees as a table or JSON."""
    if output_format == "json":
        click.echo(json.dumps([e.to_dict() for e in employees], indent=2, default=str))
        return

    if not employees:
        click.echo(empty_message)
        return

    render_employees(Console(), employees, title=title)


format_option = click.option(
    "--format", "output_format", type=click.Choice(["text", "json"]),
    default="text", help="Output format.",
)


@click.group()
def employees():
    """Employee roster commands."""
    pass


@employees.command("list")
@click.option("--sort", "sort_by", type=click.Choice(["salary", "performance", "experience"]),
              help="Sort order (default: insertion order).")
@format_option
@pass_session
def list_employees(session: Session, sort_by: Optional[str], output_format: str):
    """List all employees.

    \b
    Examples:
      roster list
      roster list --sort salary
      roster list --format json
    """
    store = session.store
    if sort_by == "salary":
        result = store.sort_by_salary()
    elif sort_by == "performance":
        result = store.sort_by_performance()
    elif sort_by == "experience":
        result = store.sort_by_experience()
    else:
        result = store.get_all()

    _emit(result, output_format, title=f"Employees ({len(result)})",
          empty_message="No employees. Add one with 'roster add'.")


@employees.command("show")
@click.argument("employee_id")
@pass_session
def show_employee(session: Session, employee_id: str):
    """Show one employee."""
    with store_errors():
        employee = session.store.get(parse_employee_id(employee_id))
    click.echo(employee.describe())


@employees.command("add")
@click.argument("name")
@click.argument("department")
@click.argument("salary", type=float)
@click.argument("rating", type=float)
@click.argument("experience", type=int)
@click.option("--id", "employee_id", help="Employee ID (default: next generated ID).")
@click.option("--inactive", is_flag=True, help="Add as inactive.")
@pass_session
def add_employee(session: Session, name: str, department: str, salary: float,
                 rating: float, experience: int, employee_id: Optional[str], inactive: bool):
    """Add an employee (replaces any employee with the same ID).

    \b
    Examples:
      roster add "Jane Smith" Finance 60000 4.0 3
      roster add "Bob" Backend 70000 3.5 2 --id 42
    """
    known = session.resolve_department(department)
    if known:
        department = known
    else:
        click.echo(
            f"Warning: '{department}' is not a configured department "
            f"({', '.join(session.settings.departments)}).",
            err=True,
        )

    new_id = parse_employee_id(employee_id) if employee_id else session.next_id()

    with store_errors():
        employee = Employee(
            employee_id=new_id,
            name=name,
            department=department,
            salary=salary,
            performance_rating=rating,
            years_of_experience=experience,
            is_active=not inactive,
        )
        session.store.add(employee)

    click.echo(f"Added {employee.describe()}")


@employees.command("remove")
@click.argument("employee_id")
@click.option("--yes", "-y", is_flag=True, help="Don't ask for confirmation.")
@pass_session
def remove_employee(session: Session, employee_id: str, yes: bool):
    """Remove an employee by ID."""
    key = parse_employee_id(employee_id)
    with store_errors():
        employee = session.store.get(key)
        if not yes:
            click.confirm(f"Are you sure you want to delete {employee.name}?", abort=True)
        session.store.remove(key)
    click.echo(f"Removed {employee.name} ({key})")


@employees.command("update")
@click.argument("employee_id")
@click.argument("field")
@click.argument("value")
@pass_session
def update_employee(session: Session, employee_id: str, field: str, value: str):
    """Update one field of an employee.

    FIELD is one of: name, department, salary, rating, experience, active.

    \b
    Examples:
      roster update 1000 salary 55000
      roster update 1000 active no
    """
    key = parse_employee_id(employee_id)
    with store_errors():
        employee = session.store.update(key, field, parse_field_value(field, value))
    click.echo(f"Updated {employee.describe()}")


@employees.command("search")
@click.argument("query")
@click.option("--by", "search_by", type=click.Choice(["any", "name", "department"]),
              default="any", help="Field to match (default: name, department or ID).")
@format_option
@pass_session
def search_employees(session: Session, query: str, search_by: str, output_format: str):
    """Search employees (case-insensitive).

    Name and ID match by substring; --by department matches the whole name.
    """
    if not query.strip():
        raise click.ClickException("Search query cannot be empty")

    store = session.store
    if search_by == "name":
        result = store.search_by_name(query)
    elif search_by == "department":
        result = store.search_by_department(query)
    else:
        result = store.search(query)

    _emit(result, output_format, title=f"Matches for '{query}'",
          empty_message="No employees match your search criteria")


@employees.command("filter")
@click.option("--min-rating", type=float, help="Minimum performance rating.")
@click.option("--salary-min", type=float, help="Minimum salary (inclusive).")
@click.option("--salary-max", type=float, help="Maximum salary (inclusive).")
@format_option
@pass_session
def filter_employees(session: Session, min_rating: Optional[float], salary_min: Optional[float],
                     salary_max: Optional[float], output_format: str):
    """Filter employees by rating and/or salary range."""
    store = session.store
    result = store.get_all()

    if min_rating is not None:
        keep = {e.employee_id for e in store.filter_by_performance(min_rating)}
        result = [e for e in result if e.employee_id in keep]

    if salary_min is not None or salary_max is not None:
        low = salary_min if salary_min is not None else float("-inf")
        high = salary_max if salary_max is not None else float("inf")
        keep = {e.employee_id for e in store.filter_by_salary_range(low, high)}
        result = [e for e in result if e.employee_id in keep]

    _emit(result, output_format, title="Filtered employees")


@employees.command("top-paid")
@click.argument("limit", type=int, required=False)
@format_option
@pass_session
def top_paid(session: Session, limit: Optional[int], output_format: str):
    """Show the highest-paid employees (default: top_paid_limit setting)."""
    if limit is None:
        limit = session.settings.top_paid_limit
    with store_errors():
        result = session.store.get_top_paid(limit)
    _emit(result, output_format, title=f"Top {limit} Paid")


@employees.command("average")
@click.argument("department")
@pass_session
def average_salary(session: Session, department: str):
    """Average salary for a department."""
    avg = session.store.get_average_salary(department)
    click.echo(f"Average Salary: ${avg:.2f}")


@employees.command("raise")
@click.option("--min-rating", type=float, help="Minimum rating (default: raise_threshold setting).")
@click.option("--amount", type=float, help="Amount to add (default: raise_amount setting).")
@pass_session
def give_raise(session: Session, min_rating: Optional[float], amount: Optional[float]):
    """Give a raise to high performers."""
    if min_rating is None:
        min_rating = session.settings.raise_threshold
    if amount is None:
        amount = session.settings.raise_amount

    with store_errors():
        raised = session.store.give_raise(min_rating, amount)

    click.echo(f"Raise of ${amount:.2f} applied to {len(raised)} employee(s) with rating >= {min_rating:.1f}.")


@employees.command("departments")
@pass_session
def departments(session: Session):
    """Show configured departments with headcount and average salary."""
    names = list(session.settings.departments)
    configured = {d.lower() for d in names}
    names += [d for d in session.store.departments() if d.lower() not in configured]

    rows = [
        (name, len(session.store.search_by_department(name)), session.store.get_average_salary(name))
        for name in names
    ]
    render_departments(Console(), rows)


@employees.command("print")
@pass_session
def print_all(session: Session):
    """Print one summary line per employee."""
    for employee in session.store.get_all():
        click.echo(employee.describe())
