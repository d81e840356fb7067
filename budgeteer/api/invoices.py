"""
Invoices Blueprint: invoices of a project or of a single contract.
"""

from flask import Blueprint, abort, render_template, request

from budgeteer.core import get_db
from budgeteer.invoices import service as invoices

bp = Blueprint("invoices", __name__, url_prefix="/invoices")


@bp.route("/")
def invoices_page():
    contract_id = request.args.get("contract_id", type=int)
    project_id = request.args.get("project_id", type=int)
    if contract_id is None and project_id is None:
        abort(400, "project_id or contract_id is required")
    with get_db(readonly=True) as conn:
        rows = invoices.list_invoices(conn, contract_id=contract_id, project_id=project_id)
    return render_template(
        "invoices/list.html",
        invoices=rows,
        project_id=project_id,
        contract_id=contract_id,
    )
