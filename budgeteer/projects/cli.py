"""Projects CLI sub-commands."""

from datetime import date
from typing import List

import typer

app = typer.Typer(no_args_is_help=True)


@app.command("list")
def list_projects():
    """List all projects in the database."""
    from budgeteer.projects.service import list_projects as _list_projects

    projects = _list_projects()

    if not projects:
        typer.echo("No projects found.")
        return

    for p in projects:
        total = p["total_cents"] / 100
        typer.echo(f"  {p['id']:<5} {p['name']:<40} {p['budget_count']:>3} budget(s) {total:>14,.2f}")
    typer.echo(f"\n  {len(projects)} project(s)")


@app.command()
def create(name: str = typer.Argument(..., help="Project name")):
    """Create a project."""
    from budgeteer.core import get_db
    from budgeteer.projects.service import create_project

    with get_db() as conn:
        project_id = create_project(conn, name=name)
    typer.echo(f"Created project {name} (id={project_id})")


@app.command("add-budget")
def add_budget(
    project_id: int = typer.Argument(..., help="Project id"),
    name: str = typer.Argument(..., help="Budget name"),
    total: float = typer.Option(0.0, "--total", help="Total amount"),
    tags: List[str] = typer.Option([], "--tag", help="Tag (repeatable)"),
):
    """Create a budget in a project."""
    from budgeteer.budgets.service import create_budget
    from budgeteer.core import get_db

    with get_db() as conn:
        budget_id = create_budget(
            conn,
            project_id=project_id,
            name=name,
            total_cents=round(total * 100) or None,
            tags=tags,
        )
    typer.echo(f"Created budget {name} (id={budget_id})")


@app.command("add-person")
def add_person(
    project_id: int = typer.Argument(..., help="Project id"),
    name: str = typer.Argument(..., help="Person name"),
    daily_rate: float = typer.Option(None, "--rate", help="Default daily rate"),
):
    """Add a person to a project."""
    from budgeteer.core import get_db
    from budgeteer.people.service import create_person

    rate_cents = round(daily_rate * 100) if daily_rate is not None else None
    with get_db() as conn:
        person_id = create_person(
            conn, project_id=project_id, name=name, default_daily_rate_cents=rate_cents
        )
    typer.echo(f"Added {name} (id={person_id})")


@app.command()
def book(
    person_id: int = typer.Argument(..., help="Person id"),
    budget_id: int = typer.Argument(..., help="Budget id"),
    minutes: int = typer.Argument(..., help="Minutes worked"),
    day: str = typer.Option(None, "--date", "-d", help="Day (YYYY-MM-DD, default today)"),
    daily_rate: float = typer.Option(0.0, "--rate", help="Daily rate"),
    plan: bool = typer.Option(False, "--plan", help="Book a plan record instead of work"),
):
    """Book a work (or plan) record."""
    from budgeteer.core import get_db
    from budgeteer.records.recording import create_plan_record, create_work_record

    create = create_plan_record if plan else create_work_record
    with get_db() as conn:
        try:
            record_id = create(
                conn,
                person_id=person_id,
                budget_id=budget_id,
                day=day or date.today(),
                minutes=minutes,
                daily_rate_cents=round(daily_rate * 100),
            )
        except ValueError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1)
    typer.echo(f"Booked {minutes} min (record id={record_id})")
