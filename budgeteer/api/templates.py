"""
Import Templates Blueprint: list, upload and download example import files.
"""

import io

from flask import Blueprint, abort, redirect, render_template, request, send_file, url_for

from budgeteer.api.helpers import required_project_id
from budgeteer.core import get_db
from budgeteer.importtemplates import service as templates
from budgeteer.projects.service import get_project

bp = Blueprint("templates", __name__, url_prefix="/templates")


@bp.route("/")
def templates_page():
    project_id = required_project_id()
    with get_db(readonly=True) as conn:
        project = get_project(conn, project_id)
        if not project:
            abort(404)
        rows = templates.list_templates(conn, project_id)
    return render_template(
        "templates/list.html",
        project=project,
        templates=rows,
        template_types=list(templates.TemplateType),
    )


@bp.route("/import", methods=["GET", "POST"])
def import_page():
    project_id = required_project_id()
    with get_db(readonly=True) as conn:
        if not get_project(conn, project_id):
            abort(404)
    error = None
    if request.method == "POST":
        upload = request.files.get("file")
        try:
            with get_db() as conn:
                templates.create_template(
                    conn,
                    project_id=project_id,
                    name=request.form.get("name", ""),
                    template_type=request.form.get("type", templates.TemplateType.WORK_RECORDS.value),
                    description=request.form.get("description") or None,
                    file_name=upload.filename if upload else None,
                    file=upload.read() if upload else None,
                )
            return redirect(url_for("templates.templates_page", project_id=project_id))
        except ValueError as exc:
            error = str(exc)
    return render_template(
        "templates/import.html",
        project_id=project_id,
        template_types=list(templates.TemplateType),
        error=error,
    ), 400 if error else 200


@bp.route("/default/<template_type>")
def download_default(template_type: str):
    try:
        file_name, content = templates.get_default_template(template_type)
    except ValueError:
        abort(404)
    return send_file(content, download_name=file_name, as_attachment=True)


@bp.route("/<int:template_id>/download")
def download_template(template_id: int):
    with get_db(readonly=True) as conn:
        template = templates.get_template(conn, template_id)
    if not template or template["file"] is None:
        abort(404)
    return send_file(
        io.BytesIO(template["file"]),
        download_name=template["file_name"] or f"template-{template_id}",
        as_attachment=True,
    )
