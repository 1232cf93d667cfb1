"""
goal_core.sources
Category-list export -> RawCategoryRecord stream.

Expected CSV columns (one row per budget-screen row, in screen order):
  Row Type, Name, Target Behavior, Target By Date, Current Balance
Row Type is "Group" or "Category". Only Row Type and Name are required.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Set, Tuple
from .config import (
    DEFAULT_CURRENCY_LOCALE,
    NA,
    ROW_TYPE_CATEGORY,
    ROW_TYPE_GROUP,
    SOURCE_REQUIRED,
)
from .currency import parse_currency
from .io_csv import ensure_required, load_csv_rows
from .models import RawCategoryRecord
from .parsing import compose_goal_text
from .utils import normalize_spaces

def _cell(row: Dict[str, Any], key: str) -> str:
    return normalize_spaces(row.get(key) or "")

def records_from_rows(rows: Iterable[Dict[str, Any]], locale: str = DEFAULT_CURRENCY_LOCALE) -> Iterator[RawCategoryRecord]:
    current_group = NA
    for line_no, r in enumerate(rows, start=2):
        kind = _cell(r, "Row Type").lower()
        name = _cell(r, "Name")
        if not kind and not name:
            continue
        name = name or NA
        if kind == ROW_TYPE_GROUP:
            current_group = name
            yield RawCategoryRecord.group(name)
        elif kind == ROW_TYPE_CATEGORY:
            balance_text = _cell(r, "Current Balance")
            balance = parse_currency(balance_text, locale) if balance_text else 0.0
            yield RawCategoryRecord(
                group_name=current_group,
                category_name=name,
                goal_text=compose_goal_text(r.get("Target Behavior"), r.get("Target By Date")),
                current_balance=balance,
            )
        else:
            raise ValueError(f"Line {line_no}: unknown Row Type {r.get('Row Type')!r} (expected Group or Category)")

def load_records(csv_path: Path, locale: str = DEFAULT_CURRENCY_LOCALE) -> List[RawCategoryRecord]:
    headers, rows = load_csv_rows(csv_path)
    if not headers:
        raise ValueError("No headers found in CSV.")
    ensure_required(headers, SOURCE_REQUIRED)
    records = list(records_from_rows(rows, locale=locale))
    logging.info("Loaded %d records from %s", len(records), csv_path)
    return records

def unique_records(records: Iterable[RawCategoryRecord]) -> Iterator[RawCategoryRecord]:
    """Drop a category seen again in the same group (first one wins)."""
    seen: Set[Tuple[str, str]] = set()
    for rec in records:
        if not rec.is_group:
            key = (rec.group_name, rec.category_name)
            if key in seen:
                logging.warning("Dropping repeated category: %s / %s", *key)
                continue
            seen.add(key)
        yield rec
