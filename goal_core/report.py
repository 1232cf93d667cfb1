"""
goal_core.report
Grouped report rows with group totals and a grand total.

Rows are numbered the way a spreadsheet numbers them (header row = 1), so
the "formula" totals mode can point =SUM ranges at the rows just written
instead of re-scanning them.

Precondition: each category is presented at most once per run. Callers
reading from a re-rendering source should pass records through
`sources.unique_records` first; a repeat reaching the builder raises
DuplicateRecordError instead of being counted twice.
"""
from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Set, Tuple
from .annualize import annual_total
from .config import (
    ANNUAL_TOTAL_COLUMN,
    GRAND_TOTAL_LABEL,
    NA,
    REPORT_COLUMNS,
    TOTAL_LABEL,
    ReportSettings,
)
from .currency import format_currency
from .errors import DuplicateRecordError
from .exclusion import is_excluded, redact_name
from .models import GroupAccumulator, RawCategoryRecord, Report, ReportRow
from .parsing import parse_goal_text
from .utils import now_local


class ReportBuilder:
    """
    One report run. `current` is None while no group is open (before the
    first header, or inside an excluded group); category records are
    dropped in that state.
    """

    def __init__(self, settings: Optional[ReportSettings] = None):
        self.settings = settings or ReportSettings()
        self.now = self.settings.now or now_local()
        self.rows: List[ReportRow] = []
        self.current: Optional[GroupAccumulator] = None
        self.group_totals = {}
        self._seen: Set[Tuple[str, str]] = set()
        self._report: Optional[Report] = None

        self._append(ReportRow(*REPORT_COLUMNS, kind="header"))
        if self.settings.include_info_row:
            for info in self.settings.info_rows:
                cells = (list(info) + [""] * len(REPORT_COLUMNS))[: len(REPORT_COLUMNS)]
                self._append(ReportRow(*cells, kind="info"))

    @property
    def formula_mode(self) -> bool:
        return self.settings.totals_mode == "formula"

    def _append(self, row: ReportRow) -> int:
        self.rows.append(row)
        return len(self.rows)

    def _money(self, amount: float) -> str:
        return format_currency(amount, self.settings.currency_locale)

    def _check_open(self) -> None:
        if self._report is not None:
            raise RuntimeError("Report already finished; start a new ReportBuilder.")

    def add(self, record: RawCategoryRecord) -> None:
        if record.is_group:
            self.open_group(record.group_name)
        else:
            self.add_category(record)

    def open_group(self, name: str) -> None:
        self._check_open()
        self.close_group()
        if is_excluded(name, self.settings.exclusions):
            logging.info("Skipping excluded group: %s", name)
            return
        self._append(ReportRow(name, kind="group"))
        self.current = GroupAccumulator(name=name, start_row=len(self.rows) + 1)

    def close_group(self) -> None:
        acc = self.current
        if acc is None:
            return
        if self.formula_mode:
            col = ANNUAL_TOTAL_COLUMN
            cell = f"=SUM({col}{acc.start_row}:{col}{acc.end_row})" if acc.rows else "=0"
        else:
            cell = self._money(acc.total)
        self._append(ReportRow(acc.name, TOTAL_LABEL, annual_total=cell, kind="total", annual_value=acc.total))
        self.group_totals[acc.name] = self.group_totals.get(acc.name, 0.0) + acc.total
        logging.debug("Closed group %s: %d rows, total %.2f", acc.name, acc.rows, acc.total)
        self.current = None

    def add_category(self, record: RawCategoryRecord) -> None:
        self._check_open()
        acc = self.current
        raw_name = record.category_name
        if acc is None or is_excluded(raw_name, self.settings.exclusions):
            return

        key = (acc.name, raw_name)
        if key in self._seen:
            raise DuplicateRecordError(*key)
        self._seen.add(key)

        name = redact_name(raw_name, self.settings.redaction_marker, self.settings.redaction_placeholder)
        goal = parse_goal_text(record.goal_text)
        annual = annual_total(goal, record.current_balance, now=self.now)

        amount = goal.target_amount
        numeric_amount = None if isinstance(amount, str) else amount
        numeric_annual = None if isinstance(annual, str) else annual

        row_number = self._append(ReportRow(
            acc.name,
            name,
            goal.target_type,
            NA if numeric_amount is None else self._money(numeric_amount),
            goal.target_frequency,
            goal.target_due_date,
            NA if numeric_annual is None else self._money(numeric_annual),
            kind="data",
            annual_value=numeric_annual,
            amount_value=numeric_amount,
        ))
        acc.add(row_number, annual)

        logging.debug(
            "Group: %r, Category: %r, goal=%r -> type=%s amount=%s frequency=%s due=%s annual=%s balance=%s",
            acc.name, name, record.goal_text, goal.target_type, amount,
            goal.target_frequency, goal.target_due_date, annual, record.current_balance,
        )

    def finish(self) -> Report:
        if self._report is not None:
            return self._report
        self.close_group()

        total_rows = [(i, r) for i, r in enumerate(self.rows, start=1) if r.kind == "total"]
        grand = sum(r.annual_value or 0.0 for _, r in total_rows)
        if self.formula_mode:
            refs = ",".join(f"{ANNUAL_TOTAL_COLUMN}{i}" for i, _ in total_rows)
            cell = f"=SUM({refs})" if refs else "=0"
        else:
            cell = self._money(grand)
        self._append(ReportRow(GRAND_TOTAL_LABEL, annual_total=cell, kind="grand_total", annual_value=grand))

        self._report = Report(
            rows=list(self.rows),
            group_totals=dict(self.group_totals),
            grand_total=grand,
            totals_mode=self.settings.totals_mode,
        )
        return self._report


def build_report(records: Iterable[RawCategoryRecord], settings: Optional[ReportSettings] = None) -> Report:
    builder = ReportBuilder(settings)
    for record in records:
        builder.add(record)
    report = builder.finish()
    logging.info(
        "Report built: %d groups, %d categories, grand total %s",
        len(report.group_totals), len(report.data_rows()), format_currency(report.grand_total),
    )
    return report
