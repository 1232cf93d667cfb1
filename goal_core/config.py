"""
goal_core.config
Central configuration/constants.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, FrozenSet, List, Optional, Tuple

NA = "N/A"

DEFAULT_INPUT_CSV = "categories.csv"

# outputs (filenames); "{stamp}" is replaced with the run timestamp
DEFAULT_CSV_OUT = "goal_export_{stamp}.csv"
DEFAULT_XLSX_OUT = "goal_export_{stamp}.xlsx"
DEFAULT_PDF_OUT = "goal_export_{stamp}.pdf"

LOCAL_TIMEZONE = "America/Denver"

REPORT_COLUMNS = [
    "Category Group",
    "Category",
    "Target Type",
    "Target Amount",
    "Target Frequency",
    "Target Due Date",
    "Annual Total",
]

# spreadsheet column holding "Annual Total" (used by formula totals)
ANNUAL_TOTAL_COLUMN = "G"

INFO_ROWS = [
    ["https://frum.finance", "Donate: https://frum.finance/donate", "", "", "", "", ""],
]

TOTAL_LABEL = "TOTAL"
GRAND_TOTAL_LABEL = "GRAND TOTAL"

DEFAULT_EXCLUSIONS: FrozenSet[str] = frozenset({"Credit Card", "NoExport"})
REDACTION_MARKER = "Redact"
REDACTION_PLACEHOLDER = "Redacted"

BALANCE_PREFIX = "Have a Balance of"
BALANCE_TARGET_TYPE = "Have a Balance"

FREQUENCY_MULTIPLIERS: Dict[str, int] = {
    "Each Week": 52,
    "Each Month": 12,
    "Each Year": 1,
}

MONTHS: Dict[str, int] = {
    "january": 1, "february": 2, "march": 3, "april": 4,
    "may": 5, "june": 6, "july": 7, "august": 8,
    "september": 9, "october": 10, "november": 11, "december": 12,
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "jun": 6, "jul": 7,
    "aug": 8, "sep": 9, "sept": 9, "oct": 10, "nov": 11, "dec": 12,
}

# locale -> (grouping symbol, decimal symbol)
CURRENCY_LOCALES: Dict[str, Tuple[str, str]] = {
    "en_US": (",", "."),
    "en_GB": (",", "."),
    "de_DE": (".", ","),
    "fr_FR": (" ", ","),
}
DEFAULT_CURRENCY_LOCALE = "en_US"

TOTALS_MODES = ("value", "formula")

# record source (exported category list)
SOURCE_REQUIRED = ["Row Type", "Name"]
ROW_TYPE_GROUP = "group"
ROW_TYPE_CATEGORY = "category"


@dataclass
class ReportSettings:
    """Everything one report run can be tuned with."""
    exclusions: FrozenSet[str] = DEFAULT_EXCLUSIONS
    redaction_marker: str = REDACTION_MARKER
    redaction_placeholder: str = REDACTION_PLACEHOLDER
    now: Optional[datetime] = None
    currency_locale: str = DEFAULT_CURRENCY_LOCALE
    totals_mode: str = "value"
    include_info_row: bool = True
    info_rows: List[List[str]] = field(default_factory=lambda: [list(r) for r in INFO_ROWS])

    def __post_init__(self):
        self.exclusions = frozenset(self.exclusions)
        if self.totals_mode not in TOTALS_MODES:
            raise ValueError(f"Unknown totals mode: {self.totals_mode} (expected one of {TOTALS_MODES})")
        if self.currency_locale not in CURRENCY_LOCALES:
            raise ValueError(f"Unknown currency locale: {self.currency_locale}")

    def with_exclusions(self, extra) -> "ReportSettings":
        self.exclusions = self.exclusions | frozenset(x for x in extra if x)
        return self
