from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from recordlens.domain.models import Employee


def to_jsonable(result: Any) -> Any:
    """
    Convert a query result into plain JSON-compatible values.

    Dict keys are stringified (partition keys are booleans), employees are
    dumped with ISO dates.
    """
    if isinstance(result, Employee):
        return result.model_dump(mode="json")
    if isinstance(result, dict):
        return {
            str(key).lower() if isinstance(key, bool) else key: to_jsonable(value)
            for key, value in result.items()
        }
    if isinstance(result, (list, tuple)):
        return [to_jsonable(item) for item in result]
    return result


def _employee_table(title: str, employees: Iterable[Employee]) -> Table:
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("ID", justify="right", style="magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Department", style="blue")
    table.add_column("Salary", justify="right", style="green")
    table.add_column("Joined", style="yellow")
    table.add_column("Projects")

    for employee in employees:
        table.add_row(
            str(employee.id),
            employee.name,
            employee.department,
            f"{employee.salary:,.2f}",
            employee.joining_date.isoformat(),
            ", ".join(employee.projects),
        )
    return table


def _is_employee_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, Employee) for item in value)


def build_tables(name: str, result: Any) -> List[Table]:
    """Build the rich tables used to display `result`. Scalars produce none."""
    if isinstance(result, Employee):
        return [_employee_table(name, [result])]

    if _is_employee_list(result):
        return [_employee_table(f"{name} ({len(result)})", result)]

    if isinstance(result, list):
        table = Table(title=name, box=box.ROUNDED)
        table.add_column("#", justify="right", style="magenta")
        table.add_column("Value", style="cyan")
        for index, item in enumerate(result, start=1):
            table.add_row(str(index), str(item))
        return [table]

    if isinstance(result, dict) and all(_is_employee_list(v) for v in result.values()):
        return [_employee_table(f"{name}: {key}", members) for key, members in result.items()]

    if isinstance(result, dict):
        table = Table(title=name, box=box.ROUNDED)
        table.add_column("Key", style="cyan")
        table.add_column("Value", justify="right", style="green")
        for key, value in result.items():
            rendered = f"{value:,.2f}" if isinstance(value, float) else str(value)
            table.add_row(str(key), rendered)
        return [table]

    return []


def print_result(name: str, result: Any, console: Optional[Console] = None) -> None:
    """
    Render a query result.

    Handles employee lists, single employees, grouped/partitioned mappings,
    plain mappings, text lists, and scalars.
    """
    console = console or Console()

    if result is None or (isinstance(result, (list, dict)) and not result):
        console.print(f"[yellow]{name}: no results.[/yellow]")
        return

    tables = build_tables(name, result)
    if not tables:
        rendered = f"{result:,.2f}" if isinstance(result, float) else str(result)
        console.print(f"[cyan]{name}[/cyan]: [bold green]{rendered}[/bold green]")
        return

    for table in tables:
        console.print(table)


def print_profile(profile: Optional[Dict[str, Any]], console: Optional[Console] = None) -> None:
    if not profile:
        return
    console = console or Console()
    duration_ms = profile["duration_seconds"] * 1000
    rss = profile.get("peak_rss_bytes")
    rss_str = f"{rss / (1024 * 1024):.2f} MB" if rss else "N/A"
    console.print(f"[dim]{profile['label']}: {duration_ms:.2f} ms, peak RSS {rss_str}[/dim]")


__all__ = ["build_tables", "print_profile", "print_result", "to_jsonable"]
