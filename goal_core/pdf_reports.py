"""
goal_core.pdf_reports
PDF creation (reportlab).
"""
from __future__ import annotations
from datetime import datetime
from pathlib import Path
from typing import List, Optional
from .currency import format_currency
from .models import Report, ReportRow
from .utils import timestamp_line

def require_reportlab():
    try:
        from reportlab.lib.pagesizes import letter, landscape  # noqa
        from reportlab.lib.units import inch  # noqa
        from reportlab.lib import colors  # noqa
        from reportlab.lib.styles import getSampleStyleSheet  # noqa
        from reportlab.platypus import (  # noqa
            SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
        )
        return (letter, landscape, inch, colors, getSampleStyleSheet,
                SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle)
    except Exception:
        raise SystemExit("Missing dependency: reportlab\nInstall with: pip3 install reportlab\n")

def _style_report_table(TableStyle, colors):
    return TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 8),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("ALIGN", (3, 1), (3, -1), "RIGHT"),
        ("ALIGN", (-1, 1), (-1, -1), "RIGHT"),
    ])

def _pdf_cells(row: ReportRow, locale: str) -> List[str]:
    cells = row.cells()
    # formulas mean nothing on paper; show the computed figure
    if row.annual_total.startswith("=") and row.annual_value is not None:
        cells[-1] = format_currency(row.annual_value, locale)
    return cells

def write_report_pdf(report: Report, pdf_path: Path, title: str = "Category Goals: Annual Totals",
                     now: Optional[datetime] = None, locale: str = "en_US") -> None:
    (letter, landscape, inch, colors, getSampleStyleSheet,
     SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle) = require_reportlab()

    margin = 0.5 * inch
    doc = SimpleDocTemplate(
        str(pdf_path),
        pagesize=landscape(letter),
        leftMargin=margin,
        rightMargin=margin,
        topMargin=margin,
        bottomMargin=margin,
    )
    styles = getSampleStyleSheet()

    story = []
    story.append(Paragraph(title, styles["Title"]))
    story.append(Spacer(1, 0.08 * inch))
    story.append(Paragraph(timestamp_line("Generated", now), styles["Normal"]))
    story.append(Spacer(1, 0.18 * inch))

    rows = [r for r in report.rows if r.kind != "info"]
    table_data = [_pdf_cells(r, locale) for r in rows]

    tbl = Table(
        table_data,
        colWidths=[1.8 * inch, 2.2 * inch, 1.2 * inch, 1.0 * inch, 1.1 * inch, 1.2 * inch, 1.0 * inch],
        repeatRows=1,
    )
    st = _style_report_table(TableStyle, colors)
    for i, r in enumerate(rows):
        if r.kind == "group":
            st.add("FONTNAME", (0, i), (-1, i), "Helvetica-Bold")
        elif r.kind == "total":
            st.add("FONTNAME", (0, i), (-1, i), "Helvetica-Bold")
            st.add("BACKGROUND", (0, i), (-1, i), colors.whitesmoke)
        elif r.kind == "grand_total":
            st.add("FONTNAME", (0, i), (-1, i), "Helvetica-Bold")
            st.add("BACKGROUND", (0, i), (-1, i), colors.lightgrey)
    tbl.setStyle(st)

    story.append(tbl)
    doc.build(story)
