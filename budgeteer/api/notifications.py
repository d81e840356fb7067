"""
Notifications Blueprint: data quality hints for a project.
"""

from flask import Blueprint, abort, jsonify, render_template

from budgeteer.api.helpers import required_project_id
from budgeteer.core import get_db
from budgeteer.notifications import describe, get_notifications_for_project
from budgeteer.projects.service import get_project

bp = Blueprint("notifications", __name__, url_prefix="/notifications")


@bp.route("/")
def notifications_page():
    project_id = required_project_id()
    with get_db(readonly=True) as conn:
        project = get_project(conn, project_id)
        if not project:
            abort(404)
        notifications = describe(get_notifications_for_project(conn, project_id))
    return render_template(
        "notifications/list.html", project=project, notifications=notifications
    )


@bp.route("/api", methods=["GET"])
def api_notifications():
    project_id = required_project_id()
    with get_db(readonly=True) as conn:
        notifications = describe(get_notifications_for_project(conn, project_id))
    return jsonify(notifications)
