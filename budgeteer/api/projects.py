"""
Projects Blueprint: Flask routes for the project list and project dashboard.

Thin delivery layer: all business logic lives in the service modules.
"""

import sqlite3
from datetime import date

from flask import Blueprint, abort, jsonify, redirect, render_template, request, url_for

from budgeteer.api.helpers import period_args
from budgeteer.budgets import list_budgets
from budgeteer.core import get_db
from budgeteer.core.config import get_statistics_defaults
from budgeteer.notifications import describe, get_notifications_for_project
from budgeteer.projects import service as projects
from budgeteer.statistics import service as stats
from budgeteer.statistics.periods import PeriodUnit, build_window

bp = Blueprint("projects", __name__, url_prefix="/projects")


# ---------------------------------------------------------------------------
# Page routes (render templates)
# ---------------------------------------------------------------------------


@bp.route("/")
def projects_page():
    with get_db(readonly=True) as conn:
        rows = projects.list_projects(conn)
    return render_template("projects/list.html", projects=rows)


@bp.route("/<int:project_id>")
def project_dashboard(project_id: int):
    """Project hub: budgets, burn charts and notifications on one page."""
    defaults = get_statistics_defaults()
    weeks, days = defaults["weeks"], defaults["days"]
    today = date.today()
    with get_db(readonly=True) as conn:
        project = projects.get_project(conn, project_id)
        if not project:
            abort(404)
        burned = stats.get_weekly_budget_burned_for_project(conn, project_id, weeks, today=today)
        planned = stats.get_weekly_budget_planned_for_project(conn, project_id, weeks, today=today)
        daily_rates = stats.get_avg_daily_rate_for_previous_days(conn, project_id, days, today=today)
        budgets = list_budgets(conn, project_id)
        notifications = describe(get_notifications_for_project(conn, project_id))

    chart = {
        "labels": [str(p) for p in build_window(PeriodUnit.WEEK, weeks, today)],
        "burned": [str(m.amount) for m in burned],
        "planned": [str(m.amount) for m in planned],
        "dailyRateLabels": [str(p) for p in build_window(PeriodUnit.DAY, days, today)],
        "dailyRates": [str(m.amount) for m in daily_rates],
    }
    return render_template(
        "projects/detail.html",
        project=project,
        budgets=budgets,
        notifications=notifications,
        chart=chart,
    )


@bp.route("/new", methods=["POST"])
def create_project_form():
    with get_db() as conn:
        try:
            pid = projects.create_project(conn, name=request.form.get("name", ""))
        except (ValueError, sqlite3.IntegrityError) as exc:
            abort(400, str(exc))
    return redirect(url_for("projects.project_dashboard", project_id=pid))


# ---------------------------------------------------------------------------
# Projects API
# ---------------------------------------------------------------------------


@bp.route("/api/projects", methods=["GET"])
def api_list_projects():
    return jsonify(projects.list_projects())


@bp.route("/api/projects", methods=["POST"])
def api_create_project():
    data = request.json or {}
    with get_db() as conn:
        try:
            pid = projects.create_project(
                conn,
                name=data.get("name", ""),
                start_date=data.get("startDate"),
                end_date=data.get("endDate"),
            )
        except sqlite3.IntegrityError:
            return jsonify({"error": "Project name already exists"}), 400
    return jsonify({"id": pid, "message": "Project created successfully"}), 201


@bp.route("/api/projects/<int:project_id>/burn", methods=["GET"])
def api_project_burn(project_id: int):
    """Burned and planned values per week (or burned per month) for charts."""
    unit, count = period_args()
    today = date.today()
    with get_db(readonly=True) as conn:
        if not projects.get_project(conn, project_id):
            return jsonify({"error": "Not found"}), 404
        if unit is PeriodUnit.MONTH:
            burned = stats.get_monthly_budget_burned_for_project(conn, project_id, count, today=today)
            planned = None
        elif unit is PeriodUnit.WEEK:
            burned = stats.get_weekly_budget_burned_for_project(conn, project_id, count, today=today)
            planned = stats.get_weekly_budget_planned_for_project(conn, project_id, count, today=today)
        else:
            return jsonify({"error": "unit must be week or month"}), 400
    return jsonify({
        "labels": [str(p) for p in build_window(unit, count, today)],
        "burned": [str(m.amount) for m in burned],
        "planned": [str(m.amount) for m in planned] if planned is not None else None,
    })


@bp.route("/api/projects/<int:project_id>/daily-rates", methods=["GET"])
def api_project_daily_rates(project_id: int):
    unit, count = period_args(PeriodUnit.DAY)
    today = date.today()
    if unit is not PeriodUnit.DAY:
        return jsonify({"error": "unit must be day"}), 400
    with get_db(readonly=True) as conn:
        rates = stats.get_avg_daily_rate_for_previous_days(conn, project_id, count, today=today)
    return jsonify({
        "labels": [str(p) for p in build_window(PeriodUnit.DAY, count, today)],
        "values": [str(m.amount) for m in rates],
    })
