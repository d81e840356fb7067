"""Statistics CLI sub-commands."""

from datetime import date

import typer

from budgeteer.statistics.periods import PeriodUnit, build_window

app = typer.Typer(no_args_is_help=True)


@app.command("weekly-burn")
def weekly_burn(
    project_id: int = typer.Argument(..., help="Project id"),
    weeks: int = typer.Option(None, "--weeks", "-w", help="Number of weeks (default from config)"),
):
    """Burned and planned budget per week for a project."""
    from budgeteer.core import get_db
    from budgeteer.core.config import get_statistics_defaults
    from budgeteer.statistics import service

    if weeks is None:
        weeks = get_statistics_defaults()["weeks"]
    today = date.today()
    with get_db(readonly=True) as conn:
        burned = service.get_weekly_budget_burned_for_project(conn, project_id, weeks, today=today)
        planned = service.get_weekly_budget_planned_for_project(conn, project_id, weeks, today=today)

    typer.echo(f"  {'Week':<10} {'Burned':>16} {'Planned':>16}")
    for week, b, p in zip(build_window(PeriodUnit.WEEK, weeks, today), burned, planned):
        typer.echo(f"  {str(week):<10} {str(b):>16} {str(p):>16}")


@app.command("budget")
def budget_stats(
    budget_id: int = typer.Argument(..., help="Budget id"),
    count: int = typer.Option(None, "--count", "-n", help="Number of periods"),
    monthly: bool = typer.Option(False, "--monthly", help="Bucket by month instead of week"),
):
    """Target vs. actual per person for a budget."""
    from budgeteer.core import get_db
    from budgeteer.core.config import get_statistics_defaults
    from budgeteer.statistics import service

    defaults = get_statistics_defaults()
    if count is None:
        count = defaults["months"] if monthly else defaults["weeks"]
    with get_db(readonly=True) as conn:
        if monthly:
            result = service.get_month_stats_for_budget(conn, budget_id, count)
        else:
            result = service.get_week_stats_for_budget(conn, budget_id, count)

    typer.echo("  " + " ".join(f"{label:>10}" for label in result.labels))
    for series in [result.target_series] + result.actual_series:
        values = " ".join(f"{v.amount:>10,.2f}" for v in series.values)
        typer.echo(f"  {values}  {series.name}")


@app.command()
def notifications(project_id: int = typer.Argument(..., help="Project id")):
    """Show data quality notifications for a project."""
    from budgeteer.core import get_db
    from budgeteer.notifications import describe, get_notifications_for_project

    with get_db(readonly=True) as conn:
        found = describe(get_notifications_for_project(conn, project_id))

    if not found:
        typer.echo("No notifications.")
        return
    for n in found:
        typer.echo(f"  [{n['type']}] {n['message']}")
