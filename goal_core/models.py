"""
goal_core.models
Records flowing through one export run.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union
from .config import NA

Amount = Union[float, str]


@dataclass(frozen=True)
class RawCategoryRecord:
    """One row observed in the budget screen (group header or category)."""
    group_name: str
    category_name: str = ""
    goal_text: str = NA
    current_balance: float = 0.0
    is_group: bool = False

    @classmethod
    def group(cls, name: str) -> "RawCategoryRecord":
        return cls(group_name=name, is_group=True)

    @property
    def name(self) -> str:
        return self.group_name if self.is_group else self.category_name


@dataclass(frozen=True)
class GoalDescriptor:
    target_type: str = NA
    target_amount: Amount = NA
    target_frequency: str = NA
    target_due_date: str = NA

    @property
    def is_na(self) -> bool:
        return self.target_amount == NA


NA_GOAL = GoalDescriptor()


@dataclass(frozen=True)
class ReportRow:
    group: str
    category: str = ""
    target_type: str = ""
    target_amount: str = ""
    target_frequency: str = ""
    target_due_date: str = ""
    annual_total: str = ""
    kind: str = "data"
    annual_value: Optional[float] = None
    amount_value: Optional[float] = None

    def cells(self) -> List[str]:
        return [
            self.group,
            self.category,
            self.target_type,
            self.target_amount,
            self.target_frequency,
            self.target_due_date,
            self.annual_total,
        ]


@dataclass
class GroupAccumulator:
    """Running state for the open group; rows are 1-based sheet row numbers."""
    name: str
    start_row: int
    end_row: int = 0
    total: float = 0.0
    rows: int = 0

    def __post_init__(self):
        if not self.end_row:
            self.end_row = self.start_row - 1

    def add(self, row_number: int, annual: Amount) -> None:
        self.end_row = row_number
        self.rows += 1
        if not isinstance(annual, str):
            self.total += annual


@dataclass
class Report:
    rows: List[ReportRow] = field(default_factory=list)
    group_totals: Dict[str, float] = field(default_factory=dict)
    grand_total: float = 0.0
    totals_mode: str = "value"

    def data_rows(self) -> List[ReportRow]:
        return [r for r in self.rows if r.kind == "data"]

    def total_rows(self) -> List[ReportRow]:
        return [r for r in self.rows if r.kind == "total"]

    def table(self) -> List[List[str]]:
        return [r.cells() for r in self.rows]
