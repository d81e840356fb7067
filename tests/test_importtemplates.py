"""Tests for import templates: default workbooks and uploads."""

import pytest
from openpyxl import load_workbook

from budgeteer.importtemplates import (
    TemplateType,
    create_template,
    get_default_template,
    get_template,
    list_templates,
)
from budgeteer.importtemplates.excel_io import TEMPLATE_HEADERS, read_header


@pytest.mark.parametrize("template_type", list(TemplateType))
def test_default_template_has_header_and_example(template_type):
    file_name, content = get_default_template(template_type)
    assert file_name.endswith(".xlsx")
    ws = load_workbook(content).active
    rows = list(ws.iter_rows(values_only=True))
    assert list(rows[0]) == TEMPLATE_HEADERS[template_type.value]
    assert rows[1][0] == "Jane Doe"


def test_unknown_default_template():
    with pytest.raises(ValueError):
        get_default_template("INVOICES")


def test_create_and_list(memory_db, seed_project):
    _, content = get_default_template(TemplateType.PLAN_RECORDS)
    data = content.getvalue()
    tid = create_template(
        memory_db, project_id=seed_project, name="Plan",
        template_type=TemplateType.PLAN_RECORDS, file_name="plan.XLSX", file=data,
    )
    (row,) = list_templates(memory_db, seed_project)
    assert row["id"] == tid
    assert row["type"] == "PLAN_RECORDS"
    assert row["columns"] == TEMPLATE_HEADERS["PLAN_RECORDS"]
    assert "file" not in row
    assert get_template(memory_db, tid)["file"] == data


def test_csv_header_with_semicolons():
    assert read_header("hours.csv", "Name;Budget;Hours\nA;B;1\n".encode()) == ["Name", "Budget", "Hours"]


def test_xls_is_stored_without_columns(memory_db, seed_project):
    tid = create_template(memory_db, project_id=seed_project, name="Old", file_name="old.xls", file=b"\xd0\xcf")
    assert get_template(memory_db, tid)["columns"] == []


def test_corrupt_workbook_rejected(memory_db, seed_project):
    with pytest.raises(ValueError, match="not a valid Excel workbook"):
        create_template(memory_db, project_id=seed_project, name="Hours", file_name="hours.xlsx", file=b"data")


@pytest.mark.parametrize("file_name", ["hours.pdf", "hours"])
def test_unsupported_file_rejected(memory_db, seed_project, file_name):
    with pytest.raises(ValueError, match="Unsupported file type"):
        create_template(memory_db, project_id=seed_project, name="Hours", file_name=file_name)


def test_unknown_type_rejected(memory_db, seed_project):
    with pytest.raises(ValueError):
        create_template(memory_db, project_id=seed_project, name="Hours", template_type="INVOICES")
