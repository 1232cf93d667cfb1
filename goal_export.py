#!/usr/bin/env python3
"""
goal_export.py: category goals CSV -> annualized report (CSV/Excel/PDF)

Reads a category-list export (one row per budget-screen row, groups and
their categories in screen order), parses each category's goal sentence,
works out the yearly amount each goal needs, and writes a grouped report
with a TOTAL row per group and a GRAND TOTAL row.

Install:
  pip3 install -e .

Run examples:
  python3 goal_export.py --in categories.csv quick
  python3 goal_export.py --in categories.csv csv
  python3 goal_export.py --in categories.csv --totals formula xlsx
  python3 goal_export.py --in categories.csv --exclude "Savings" --now 2026-01 all

Input CSV minimum columns:
  Row Type, Name
Optional:
  Target Behavior, Target By Date, Current Balance
"""

from __future__ import annotations

import argparse
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from goal_core.config import (
    CURRENCY_LOCALES,
    DEFAULT_CSV_OUT,
    DEFAULT_CURRENCY_LOCALE,
    DEFAULT_INPUT_CSV,
    DEFAULT_PDF_OUT,
    DEFAULT_XLSX_OUT,
    REDACTION_MARKER,
    TOTALS_MODES,
    ReportSettings,
)
from goal_core.currency import fmt_money
from goal_core.errors import GoalExportError
from goal_core.excel_reports import write_report_excel
from goal_core.io_csv import write_report_csv
from goal_core.models import Report
from goal_core.paths import out_path
from goal_core.pdf_reports import write_report_pdf
from goal_core.report import build_report
from goal_core.sources import load_records, unique_records
from goal_core.utils import now_local, stamped_filename, timestamp_line

# -----------------------------
# Logging
# -----------------------------
LOG_FILE_HANDLER = "goal_export.file"
LOG_STREAM_HANDLER = "goal_export.stream"

def setup_logging(output_dir: Path, verbose: bool = False) -> Path:
    logs_dir = output_dir / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = logs_dir / f"goal_export_{stamp}.log"

    level = logging.DEBUG if verbose else logging.INFO
    root = logging.getLogger()
    root.setLevel(level)

    # a later run in the same process replaces our handlers; others are left alone
    for h in list(root.handlers):
        if h.get_name() in (LOG_FILE_HANDLER, LOG_STREAM_HANDLER):
            root.removeHandler(h)
            h.close()

    fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")

    fh = logging.FileHandler(str(log_path), encoding="utf-8")
    fh.set_name(LOG_FILE_HANDLER)
    fh.setLevel(level)
    fh.setFormatter(fmt)

    sh = logging.StreamHandler()
    sh.set_name(LOG_STREAM_HANDLER)
    sh.setLevel(level)
    sh.setFormatter(fmt)

    root.addHandler(fh)
    root.addHandler(sh)

    logging.info("Logging started: %s", log_path)
    return log_path


# -----------------------------
# Helpers
# -----------------------------
def parse_now(value: str) -> datetime:
    """--now accepts YYYY-MM or YYYY-MM-DD."""
    for fmt in ("%Y-%m-%d", "%Y-%m"):
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    raise argparse.ArgumentTypeError(f"Expected YYYY-MM or YYYY-MM-DD, got {value!r}")


def resolve_input_path(path_str: str) -> Path:
    p = Path(path_str).expanduser()
    if p.exists():
        return p.resolve()
    alt = Path(__file__).resolve().parent / path_str
    if alt.exists():
        return alt.resolve()
    return p.resolve()


def settings_from_args(args: argparse.Namespace) -> ReportSettings:
    settings = ReportSettings(
        redaction_marker=args.redact_marker,
        now=args.now or now_local(),
        currency_locale=args.locale,
        totals_mode=args.totals,
        include_info_row=not args.no_info_row,
    )
    return settings.with_exclusions(args.exclude or [])


def load_report(in_path: Path, settings: ReportSettings, dedupe: bool) -> Report:
    records = load_records(in_path, locale=settings.currency_locale)
    if dedupe:
        records = unique_records(records)
    return build_report(records, settings)


# -----------------------------
# Commands
# -----------------------------
def run_quick(report: Report, settings: ReportSettings) -> None:
    print(timestamp_line("Generated", settings.now))
    print("✅ Goal Summary (annual):")
    for name, total in report.group_totals.items():
        print(f"  - {name}: {fmt_money(total)}")
    print(f"  = GRAND TOTAL: {fmt_money(report.grand_total)}")


def run_csv(report: Report, settings: ReportSettings, out_name: str, output_dir: Path) -> Path:
    path = out_path("csv", stamped_filename(out_name, settings.now), root=output_dir)
    write_report_csv(path, report)
    logging.info("CSV written: %s", path)
    return path


def run_xlsx(report: Report, settings: ReportSettings, out_name: str, output_dir: Path) -> Path:
    path = out_path("xlsx", stamped_filename(out_name, settings.now), root=output_dir)
    write_report_excel(report, path)
    logging.info("Excel written: %s", path)
    return path


def run_pdf(report: Report, settings: ReportSettings, out_name: str, output_dir: Path) -> Path:
    path = out_path("pdf", stamped_filename(out_name, settings.now), root=output_dir)
    write_report_pdf(report, path, now=settings.now, locale=settings.currency_locale)
    logging.info("PDF written: %s", path)
    return path


def run_all(report: Report, settings: ReportSettings, output_dir: Path) -> List[Path]:
    paths = [
        run_csv(report, settings, DEFAULT_CSV_OUT, output_dir),
        run_xlsx(report, settings, DEFAULT_XLSX_OUT, output_dir),
        run_pdf(report, settings, DEFAULT_PDF_OUT, output_dir),
    ]
    print("✅ ALL reports completed.")
    for p in paths:
        print(f"   - {p}")
    return paths


# -----------------------------
# CLI
# -----------------------------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Goal Export: category goals -> annualized grouped report.")
    p.add_argument("--in", dest="input_csv", default=DEFAULT_INPUT_CSV, help="Category list CSV.")
    p.add_argument("--outdir", default="output", help="Output root (csv/, xlsx/, pdf/, logs/ go under it).")
    p.add_argument("--exclude", action="append", metavar="TEXT",
                   help="Skip groups/categories whose name contains TEXT (adds to Credit Card, NoExport).")
    p.add_argument("--redact-marker", default=REDACTION_MARKER,
                   help="Category names containing this text are shown as 'Redacted'.")
    p.add_argument("--now", type=parse_now, default=None, help="Month used for due-date math (YYYY-MM).")
    p.add_argument("--locale", choices=sorted(CURRENCY_LOCALES), default=DEFAULT_CURRENCY_LOCALE)
    p.add_argument("--totals", choices=TOTALS_MODES, default="value",
                   help="value: precomputed sums; formula: spreadsheet =SUM ranges.")
    p.add_argument("--no-info-row", action="store_true", help="Omit the info line under the header.")
    p.add_argument("--dedupe", action="store_true", help="Drop categories listed twice in the same group.")
    p.add_argument("--verbose", action="store_true", help="Log every parsed category.")

    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("quick", help="Print group totals and the grand total to console.")

    c = sub.add_parser("csv", help="Write the report as CSV (every cell quoted).")
    c.add_argument("--out", default=DEFAULT_CSV_OUT)

    x = sub.add_parser("xlsx", help="Write the report as an Excel workbook.")
    x.add_argument("--out", default=DEFAULT_XLSX_OUT)

    d = sub.add_parser("pdf", help="Write the report as a PDF table.")
    d.add_argument("--out", default=DEFAULT_PDF_OUT)

    sub.add_parser("all", help="Write CSV + Excel + PDF.")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    output_dir = Path(args.outdir).expanduser()
    setup_logging(output_dir, verbose=args.verbose)

    in_path = resolve_input_path(args.input_csv)
    if not in_path.exists():
        raise FileNotFoundError(f"Input CSV not found: {args.input_csv}")

    settings = settings_from_args(args)
    try:
        report = load_report(in_path, settings, dedupe=args.dedupe)
    except GoalExportError as e:
        logging.error("Report not generated: %s", e)
        return 1

    if args.cmd == "quick":
        run_quick(report, settings)
    elif args.cmd == "csv":
        run_csv(report, settings, args.out, output_dir)
    elif args.cmd == "xlsx":
        run_xlsx(report, settings, args.out, output_dir)
    elif args.cmd == "pdf":
        run_pdf(report, settings, args.out, output_dir)
    elif args.cmd == "all":
        run_all(report, settings, output_dir)
    else:
        raise ValueError(f"Unknown command: {args.cmd}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
