"""
Excel I/O for Import Templates

Generates the default import templates and reads the header row of uploaded
templates. Uses openpyxl. No Flask imports.
"""

import csv
import io
import zipfile
from typing import Dict, List

from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from budgeteer.core import get_logger

logger = get_logger("budgeteer.importtemplates.excel_io")

# Columns of the default template per template type
TEMPLATE_HEADERS: Dict[str, List[str]] = {
    "WORK_RECORDS": ["Name", "Budget", "Date", "Hours", "Daily Rate"],
    "PLAN_RECORDS": ["Name", "Budget", "Week Start", "Planned Hours", "Daily Rate"],
}

_EXAMPLE_ROWS: Dict[str, List] = {
    "WORK_RECORDS": ["Jane Doe", "Backend", "2024-03-04", 7.5, 800],
    "PLAN_RECORDS": ["Jane Doe", "Backend", "2024-03-04", 32, 800],
}

_SHEET_TITLES = {
    "WORK_RECORDS": "Working Hours",
    "PLAN_RECORDS": "Resource Plan",
}


def default_file_name(template_type: str) -> str:
    return f"{template_type.lower().replace('_', '-')}-template.xlsx"


def generate_default_template(template_type: str) -> io.BytesIO:
    """Generate the default Excel template for a template type."""
    headers = TEMPLATE_HEADERS[template_type]

    wb = Workbook()
    ws = wb.active
    ws.title = _SHEET_TITLES[template_type]

    for col, header in enumerate(headers, 1):
        ws.cell(row=1, column=col, value=header)
    for col, value in enumerate(_EXAMPLE_ROWS[template_type], 1):
        ws.cell(row=2, column=col, value=value)

    for i, width in enumerate([22, 22, 14, 14, 12], 1):
        ws.column_dimensions[chr(64 + i)].width = width

    output = io.BytesIO()
    wb.save(output)
    output.seek(0)
    return output


def read_header(file_name: str, data: bytes) -> List[str]:
    """
    Column names in the first row of an uploaded template.

    .xls workbooks cannot be opened with openpyxl and yield an empty list.

    Raises:
        ValueError: if the file cannot be read as a workbook or CSV
    """
    extension = file_name.rsplit(".", 1)[-1].lower()
    if extension == "csv":
        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError:
            raise ValueError(f"{file_name} is not a UTF-8 encoded CSV file")
        first_line = text.splitlines()[0] if text else ""
        delimiter = ";" if first_line.count(";") > first_line.count(",") else ","
        first = next(csv.reader([first_line], delimiter=delimiter), [])
        return [cell.strip() for cell in first if cell.strip()]

    if extension != "xlsx":
        return []

    try:
        wb = load_workbook(io.BytesIO(data), read_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError) as exc:
        logger.warning("Rejected workbook %s: %s", file_name, exc)
        raise ValueError(f"{file_name} is not a valid Excel workbook")

    try:
        first = next(wb.active.iter_rows(max_row=1, values_only=True), ())
        return [str(cell).strip() for cell in first if cell is not None and str(cell).strip()]
    finally:
        wb.close()
