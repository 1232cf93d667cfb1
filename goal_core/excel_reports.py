"""
goal_core.excel_reports
Excel creation (openpyxl).
"""
from __future__ import annotations
from pathlib import Path
from typing import Any, List
from .models import Report, ReportRow

MONEY_FORMAT = '#,##0.00'
AMOUNT_COL = 4
ANNUAL_COL = 7
BOLD_KINDS = ("header", "group", "total", "grand_total")
COLUMN_WIDTHS = {"A": 28, "B": 32, "C": 18, "D": 14, "E": 16, "F": 18, "G": 14}

def require_openpyxl():
    try:
        from openpyxl import Workbook  # noqa
        from openpyxl.styles import Font  # noqa
        return Workbook, Font
    except Exception:
        raise SystemExit("Missing dependency: openpyxl\nInstall with: pip3 install openpyxl\n")

def _sheet_values(row: ReportRow) -> List[Any]:
    values: List[Any] = row.cells()
    if row.kind == "data":
        if row.amount_value is not None:
            values[AMOUNT_COL - 1] = row.amount_value
        if row.annual_value is not None:
            values[ANNUAL_COL - 1] = row.annual_value
    elif row.kind in ("total", "grand_total"):
        # "=SUM(...)" strings are stored by openpyxl as live formulas
        if not row.annual_total.startswith("="):
            values[ANNUAL_COL - 1] = row.annual_value
    return values

def _keep_text(ws, row: ReportRow) -> None:
    """Names starting with "=" stay text; only builder totals are formulas."""
    rr = ws.max_row
    for c in range(1, ANNUAL_COL + 1):
        if c == ANNUAL_COL and row.kind in ("total", "grand_total"):
            continue
        cell = ws.cell(row=rr, column=c)
        if isinstance(cell.value, str) and cell.value.startswith("="):
            cell.data_type = "s"

def write_report_excel(report: Report, xlsx_path: Path, title: str = "Goal Export") -> None:
    """
    One sheet, one row per report row, in report order. Nothing is inserted
    above the header so formula row references stay valid.
    """
    Workbook, Font = require_openpyxl()
    BOLD = Font(bold=True)

    wb = Workbook()
    ws = wb.active
    ws.title = title[:31]

    for row in report.rows:
        ws.append(_sheet_values(row))
        _keep_text(ws, row)
        if row.kind in BOLD_KINDS:
            rr = ws.max_row
            for c in range(1, ANNUAL_COL + 1):
                ws.cell(row=rr, column=c).font = BOLD

    for r in range(2, ws.max_row + 1):
        ws.cell(row=r, column=AMOUNT_COL).number_format = MONEY_FORMAT
        ws.cell(row=r, column=ANNUAL_COL).number_format = MONEY_FORMAT

    for col, width in COLUMN_WIDTHS.items():
        ws.column_dimensions[col].width = width

    wb.save(xlsx_path)
