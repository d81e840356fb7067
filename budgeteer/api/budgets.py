"""
Budgets Blueprint: budget overview (tag filter), budget detail and edit form.

Thin delivery layer: all business logic lives in budgets and statistics.
"""

from decimal import Decimal, InvalidOperation

from flask import Blueprint, abort, jsonify, redirect, render_template, request, url_for

from budgeteer.api.helpers import budget_filter_arg, period_args, required_project_id
from budgeteer.budgets import service as budgets
from budgeteer.budgets.models import EditBudgetData
from budgeteer.core import get_db
from budgeteer.core.config import get_currency, get_statistics_defaults
from budgeteer.core.money import Money
from budgeteer.notifications import describe, get_notifications_for_budget
from budgeteer.projects.service import get_project
from budgeteer.statistics import service as stats
from budgeteer.statistics.periods import PeriodUnit

bp = Blueprint("budgets", __name__, url_prefix="/budgets")


def _week_or_month(unit: PeriodUnit) -> PeriodUnit:
    if unit is PeriodUnit.DAY:
        abort(400, "unit must be week or month")
    return unit


def _form_to_edit_data(budget_id=None) -> EditBudgetData:
    raw_total = (request.form.get("total") or "0").replace(",", "").strip()
    try:
        total = Decimal(raw_total)
    except InvalidOperation:
        raise ValueError(f"Invalid total: {raw_total}")
    return EditBudgetData(
        id=budget_id,
        title=request.form.get("title", ""),
        total=Money.from_cents(total * 100, get_currency()),
        import_key=request.form.get("import_key", ""),
        tags=[t.strip() for t in request.form.get("tags", "").split(",") if t.strip()],
    )


# ---------------------------------------------------------------------------
# Page routes (render templates)
# ---------------------------------------------------------------------------


@bp.route("/")
def overview_page():
    project_id = required_project_id()
    budget_filter = budget_filter_arg(project_id)
    with get_db(readonly=True) as conn:
        project = get_project(conn, project_id)
        if not project:
            abort(404)
        rows = budgets.list_budgets_by_filter(conn, budget_filter)
        tags = budgets.list_tags(conn, project_id)
        week_stats = stats.get_week_stats_for_budgets(
            conn, budget_filter, get_statistics_defaults()["weeks"]
        )
    return render_template(
        "budgets/overview.html",
        project=project,
        budgets=rows,
        tags=tags,
        selected_tags=budget_filter.selected_tags,
        stats=week_stats.to_dict(),
    )


@bp.route("/<int:budget_id>")
def budget_detail(budget_id: int):
    defaults = get_statistics_defaults()
    with get_db(readonly=True) as conn:
        budget = budgets.get_budget_detail(conn, budget_id)
        if not budget:
            abort(404)
        week_stats = stats.get_week_stats_for_budget(conn, budget_id, defaults["weeks"])
        month_stats = stats.get_month_stats_for_budget(conn, budget_id, defaults["months"])
        people = stats.get_people_distribution(conn, budget_id)
        notifications = describe(get_notifications_for_budget(conn, budget_id))
    return render_template(
        "budgets/detail.html",
        budget=budget,
        week_stats=week_stats.to_dict(),
        month_stats=month_stats.to_dict(),
        people=people,
        notifications=notifications,
    )


@bp.route("/new", methods=["GET", "POST"])
def new_budget():
    project_id = required_project_id()
    with get_db(readonly=True) as conn:
        if not get_project(conn, project_id):
            abort(404)
    error = None
    data = EditBudgetData(None, "", Money.zero(), "")
    if request.method == "POST":
        try:
            data = _form_to_edit_data()
            with get_db() as conn:
                budget_id = budgets.save_budget(conn, project_id, data)
            return redirect(url_for("budgets.budget_detail", budget_id=budget_id))
        except ValueError as exc:
            error = str(exc)
    return render_template(
        "budgets/edit.html", budget=data, project_id=project_id, error=error
    ), 400 if error else 200


@bp.route("/<int:budget_id>/edit", methods=["GET", "POST"])
def edit_budget(budget_id: int):
    with get_db(readonly=True) as conn:
        data = budgets.load_budget_to_edit(conn, budget_id)
        row = conn.execute(
            "SELECT project_id FROM budgets WHERE id = ?", (budget_id,)
        ).fetchone()
    if data is None:
        abort(404)

    error = None
    if request.method == "POST":
        try:
            data = _form_to_edit_data(budget_id)
            with get_db() as conn:
                budgets.save_budget(conn, row["project_id"], data)
            return redirect(url_for("budgets.budget_detail", budget_id=budget_id))
        except ValueError as exc:
            error = str(exc)
    return render_template(
        "budgets/edit.html", budget=data, project_id=row["project_id"], error=error
    ), 400 if error else 200


# ---------------------------------------------------------------------------
# Statistics API
# ---------------------------------------------------------------------------


@bp.route("/api/<int:budget_id>/stats", methods=["GET"])
def api_budget_stats(budget_id: int):
    unit, count = period_args()
    unit = _week_or_month(unit)
    with get_db(readonly=True) as conn:
        if not budgets.get_budget_detail(conn, budget_id):
            return jsonify({"error": "Not found"}), 404
        if unit is PeriodUnit.WEEK:
            result = stats.get_week_stats_for_budget(conn, budget_id, count)
        else:
            result = stats.get_month_stats_for_budget(conn, budget_id, count)
    return jsonify(result.to_dict())


@bp.route("/api/stats", methods=["GET"])
def api_filtered_stats():
    """Target vs. actual for all budgets matching ?project_id=&tags=."""
    budget_filter = budget_filter_arg(required_project_id())
    unit, count = period_args()
    unit = _week_or_month(unit)
    with get_db(readonly=True) as conn:
        if unit is PeriodUnit.WEEK:
            result = stats.get_week_stats_for_budgets(conn, budget_filter, count)
        else:
            result = stats.get_month_stats_for_budgets(conn, budget_filter, count)
    return jsonify(result.to_dict())


@bp.route("/api/<int:budget_id>/people", methods=["GET"])
def api_people_distribution(budget_id: int):
    with get_db(readonly=True) as conn:
        shares = stats.get_people_distribution(conn, budget_id)
    return jsonify([share.to_dict() for share in shares])
