"""Rich renderer for employee lists.

Transforms SDK Employee objects into formatted Rich tables.
"""

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from roster.sdk import Employee


def render_employees(console: Console, employees: List[Employee], title: Optional[str] = None) -> None:
    """Render employees as a Rich table.

    Args:
        console: Rich Console instance
        employees: Employees in display order
        title: Optional table title
    """
    table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Department")
    table.add_column("Salary", justify="right")
    table.add_column("Rating", justify="right")
    table.add_column("Exp", justify="right")
    table.add_column("Active", justify="center")

    for e in employees:
        table.add_row(
            str(e.employee_id),
            e.name,
            e.department,
            _fmt(e.salary),
            f"{e.performance_rating:.1f}",
            str(e.years_of_experience),
            "Yes" if e.is_active else "[dim]No[/dim]",
        )

    console.print(table)


def render_departments(console: Console, rows: List[tuple]) -> None:
    """Render (department, headcount, average salary) rows."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("Department", style="cyan")
    table.add_column("Employees", justify="right")
    table.add_column("Avg Salary", justify="right")

    for department, headcount, average in rows:
        table.add_row(
            department,
            str(headcount),
            _fmt(average) if headcount else "[dim]-[/dim]",
        )

    console.print(table)


def _fmt(amount: float) -> str:
    """Format currency amount."""
    return f"${amount:,.2f}"
