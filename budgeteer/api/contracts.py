"""
Contracts Blueprint: contract list and contract detail with its budgets,
invoices and project-defined attributes.
"""

from flask import Blueprint, abort, render_template

from budgeteer.api.helpers import required_project_id
from budgeteer.contracts import service as contracts
from budgeteer.core import get_db
from budgeteer.projects.service import get_project

bp = Blueprint("contracts", __name__, url_prefix="/contracts")


@bp.route("/")
def contracts_page():
    project_id = required_project_id()
    with get_db(readonly=True) as conn:
        project = get_project(conn, project_id)
        if not project:
            abort(404)
        rows = contracts.list_contracts(conn, project_id)
    return render_template("contracts/list.html", project=project, contracts=rows)


@bp.route("/<int:contract_id>")
def contract_detail(contract_id: int):
    with get_db(readonly=True) as conn:
        contract = contracts.get_contract(conn, contract_id)
    if contract is None:
        abort(404)
    return render_template("contracts/detail.html", contract=contract)
