from __future__ import annotations

import json
import sys
from datetime import datetime
from typing import Optional

import typer

from recordlens.config import get_settings
from recordlens.dispatcher import describe_queries, run_query
from recordlens.exceptions import UnknownQueryError
from recordlens.infrastructure.record_store import get_default_store
from recordlens.reporter import print_profile, print_result, to_jsonable
from recordlens.utils.logging import configure_logging

app = typer.Typer(help="recordlens: query the employee store and try the functional toolkit.")


@app.callback()
def _bootstrap() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json_logs={settings.log_json} | "
        f"records={len(get_default_store())} | "
        f"heavy_delay_ms={settings.heavy_computation_delay_ms} profile={settings.profile_queries}"
    )


@app.command("list")
def list_queries() -> None:
    """
    List the registered queries and toolkit features with their parameters.
    """
    for spec in describe_queries():
        params = f" [{', '.join(spec.params)}]" if spec.params else ""
        typer.echo(f"{spec.name}{params}: {spec.description}")


@app.command()
def query(
    name: str = typer.Argument(..., help="Query name (see `list`)."),
    dept: Optional[str] = typer.Option(None, "--dept", "-d", help="Department name."),
    threshold: Optional[float] = typer.Option(
        None, "--threshold", "--salary", "-t", help="Salary threshold."
    ),
    min_salary: Optional[float] = typer.Option(None, "--min-salary", help="Minimum salary (exclusive)."),
    after: Optional[datetime] = typer.Option(
        None, "--after", formats=["%Y-%m-%d"], help="Joined strictly after this date (YYYY-MM-DD)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
) -> None:
    """
    Run one query against the seeded employee store.
    """
    try:
        outcome = run_query(
            name,
            dept=dept,
            threshold=threshold,
            min_salary=min_salary,
            joined_after=after.date() if after else None,
        )
    except (UnknownQueryError, TypeError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    if as_json:
        typer.echo(json.dumps(to_jsonable(outcome.result), indent=2))
        return

    print_result(name, outcome.result)
    if outcome.profile is not None:
        print_profile(outcome.profile.as_dict())


@app.command()
def optional(
    value: Optional[str] = typer.Option(None, "--input", "-i", help="Value to transform; omit for none."),
) -> None:
    """
    Uppercase the input and keep it only if it starts with J.
    """
    typer.echo(run_query("robust_optional_demo", value=value).result)


@app.command()
def age(birth_date: str = typer.Argument(..., help="Birth date as YYYY-MM-DD.")) -> None:
    """
    Years, months, and days since a birth date.
    """
    typer.echo(run_query("calculate_age", birth_date=birth_date).result)


@app.command()
def functional(
    value: str = typer.Argument(..., help="Input text."),
    mode: str = typer.Option(..., "--mode", "-m", help="Transform: reverse or upper."),
) -> None:
    """
    Apply a named text transform.
    """
    typer.echo(run_query("apply_named_function", text=value, mode=mode).result)


@app.command()
def pipeline(value: str = typer.Argument(..., help="Input text.")) -> None:
    """
    Trim, uppercase, then mask the input.
    """
    typer.echo(run_query("text_pipeline", text=value).result)


@app.command()
def discount(
    code: str = typer.Argument(..., help="Discount code (case-sensitive)."),
    price: float = typer.Argument(..., help="Price before discount."),
) -> None:
    """
    Apply a discount code to a price; unknown codes leave it unchanged.
    """
    typer.echo(run_query("calculate_discount", code=code, price=price).result)


@app.command()
def lazy(
    perform: bool = typer.Option(
        True, "--perform/--no-perform", help="Whether to run the expensive computation."
    ),
) -> None:
    """
    Run (or skip) the slow computation behind the lazy gate.
    """
    outcome = run_query("heavy_computation", perform=perform)
    typer.echo(outcome.result)
    if outcome.profile is not None:
        typer.echo(f"took {outcome.profile.duration_seconds * 1000:.0f} ms", err=True)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
