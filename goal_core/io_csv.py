"""
goal_core.io_csv
CSV reading/writing + column validation.
"""
from __future__ import annotations
import csv
from pathlib import Path
from typing import Any, Dict, List, Tuple
from .models import Report

def load_csv_rows(csv_path: Path) -> Tuple[List[str], List[Dict[str, Any]]]:
    with open(csv_path, newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        rows = list(reader)
        headers = reader.fieldnames or []
    return headers, rows

def write_report_csv(out_path: Path, report: Report) -> None:
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f, quoting=csv.QUOTE_ALL)
        w.writerows(report.table())

def ensure_required(headers: List[str], required: List[str]) -> None:
    missing = [h for h in required if h not in headers]
    if missing:
        raise ValueError(f"CSV missing required columns: {missing}")
