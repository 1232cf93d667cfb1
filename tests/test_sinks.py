"""Tests for CSV / Excel / PDF report writers."""

import csv

import pytest
from openpyxl import load_workbook

from goal_core.config import REPORT_COLUMNS, ReportSettings
from goal_core.excel_reports import write_report_excel
from goal_core.io_csv import write_report_csv
from goal_core.models import RawCategoryRecord
from goal_core.pdf_reports import write_report_pdf
from goal_core.report import build_report


class TestCsvSink:
    def test_every_cell_quoted(self, tmp_path, sample_records, settings):
        report = build_report(sample_records, settings)
        path = tmp_path / "report.csv"
        write_report_csv(path, report)
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == ",".join(f'"{c}"' for c in REPORT_COLUMNS)
        assert lines[-1] == '"GRAND TOTAL","","","","","","14,320.00"'
        assert len(lines) == len(report.rows)

    def test_reads_back_as_table(self, tmp_path, sample_records, settings):
        report = build_report(sample_records, settings)
        path = tmp_path / "report.csv"
        write_report_csv(path, report)
        with open(path, newline="", encoding="utf-8") as f:
            assert list(csv.reader(f)) == report.table()


class TestExcelSink:
    def test_value_totals_are_numbers(self, tmp_path, sample_records, settings):
        report = build_report(sample_records, settings)
        path = tmp_path / "report.xlsx"
        write_report_excel(report, path)
        ws = load_workbook(path).active
        assert [c.value for c in ws[1]] == REPORT_COLUMNS
        assert ws["D4"].value == 1000.0
        assert ws["G4"].value == 12000.0
        assert ws["G6"].value == "N/A"
        assert ws["G7"].value == pytest.approx(12600.0)
        assert ws["G12"].value == pytest.approx(14320.0)
        assert ws["A3"].font.bold

    def test_formula_totals_are_live(self, tmp_path, sample_records, now):
        report = build_report(sample_records, ReportSettings(now=now, totals_mode="formula"))
        path = tmp_path / "report.xlsx"
        write_report_excel(report, path)
        ws = load_workbook(path).active
        assert ws["G7"].value == "=SUM(G4:G6)"
        assert ws["G11"].value == "=SUM(G9:G10)"
        assert ws["G12"].value == "=SUM(G7,G11)"
        assert ws["G9"].value == pytest.approx(1200.0)

    def test_names_starting_with_equals_stay_text(self, tmp_path, category, now):
        records = [
            RawCategoryRecord.group("=Fun"),
            category("=Fun", "=Movies", "Spend 10.00 Each Month"),
        ]
        report = build_report(records, ReportSettings(now=now, totals_mode="formula"))
        path = tmp_path / "report.xlsx"
        write_report_excel(report, path)
        ws = load_workbook(path).active
        for ref in ("A3", "A4", "B4", "A5"):
            assert ws[ref].value.startswith("=")
            assert ws[ref].data_type == "s"
        assert ws["G5"].value == "=SUM(G4:G4)"
        assert ws["G5"].data_type == "f"
        assert ws["G6"].data_type == "f"


class TestPdfSink:
    def test_writes_pdf(self, tmp_path, sample_records, now):
        report = build_report(sample_records, ReportSettings(now=now, totals_mode="formula"))
        path = tmp_path / "report.pdf"
        write_report_pdf(report, path, now=now)
        assert path.read_bytes().startswith(b"%PDF")
