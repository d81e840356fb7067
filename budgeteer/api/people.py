"""
People Blueprint: team members of a project and their burn statistics.
"""

from datetime import date

from flask import Blueprint, abort, jsonify, render_template

from budgeteer.api.helpers import period_args, required_project_id
from budgeteer.core import get_db
from budgeteer.core.config import get_statistics_defaults
from budgeteer.people import service as people
from budgeteer.projects.service import get_project
from budgeteer.statistics import service as stats
from budgeteer.statistics.periods import PeriodUnit, build_window

bp = Blueprint("people", __name__, url_prefix="/people")


@bp.route("/")
def people_page():
    project_id = required_project_id()
    with get_db(readonly=True) as conn:
        project = get_project(conn, project_id)
        if not project:
            abort(404)
        rows = people.list_people(conn, project_id)
    return render_template("people/list.html", project=project, people=rows)


@bp.route("/<int:person_id>")
def person_detail(person_id: int):
    weeks = get_statistics_defaults()["weeks"]
    today = date.today()
    with get_db(readonly=True) as conn:
        person = people.get_person(conn, person_id)
        if not person:
            abort(404)
        distribution = stats.get_budget_distribution(conn, person_id)
        burned = stats.get_weekly_budget_burned_for_person(conn, person_id, weeks, today=today)
        planned = stats.get_weekly_budget_planned_for_person(conn, person_id, weeks, today=today)
        week_stats = stats.get_week_stats_for_person(conn, person_id, weeks, today=today)

    chart = {
        "labels": [str(p) for p in build_window(PeriodUnit.WEEK, weeks, today)],
        "burned": [str(m.amount) for m in burned],
        "planned": [str(m.amount) for m in planned],
    }
    return render_template(
        "people/detail.html",
        person=person,
        distribution=distribution,
        chart=chart,
        week_stats=week_stats.to_dict(),
    )


@bp.route("/api/<int:person_id>/stats", methods=["GET"])
def api_person_stats(person_id: int):
    """Target vs. actual for a person, one actual series per budget."""
    unit, count = period_args()
    with get_db(readonly=True) as conn:
        if not people.get_person(conn, person_id):
            return jsonify({"error": "Not found"}), 404
        if unit is PeriodUnit.WEEK:
            result = stats.get_week_stats_for_person(conn, person_id, count)
        elif unit is PeriodUnit.MONTH:
            result = stats.get_month_stats_for_person(conn, person_id, count)
        else:
            return jsonify({"error": "unit must be week or month"}), 400
    return jsonify(result.to_dict())


@bp.route("/api/<int:person_id>/budgets", methods=["GET"])
def api_budget_distribution(person_id: int):
    with get_db(readonly=True) as conn:
        shares = stats.get_budget_distribution(conn, person_id)
    return jsonify([share.to_dict() for share in shares])
