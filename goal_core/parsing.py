"""
goal_core.parsing
Goal sentence / due date parsing.

Goal text comes from the budget screen's target inspector, e.g.

    Spend 250.00 Each Month
    Set Aside Another 1,000.00 Each Year
    Have a Balance of 5,000.00 By March 2026

Two grammars are tried in order. Anything neither grammar accepts becomes
the all-"N/A" descriptor; parsing never raises.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union
from .config import BALANCE_PREFIX, BALANCE_TARGET_TYPE, MONTHS, NA
from .models import NA_GOAL, GoalDescriptor
from .utils import normalize_spaces

AMOUNT_PATTERN = r"(?:\d{1,3}(?:,\d{3})*|\d+)(?:\.\d{2})?"

GENERAL_RE = re.compile(
    rf"^(?P<verb>[A-Za-z ]+?) (?P<amount>{AMOUNT_PATTERN})"
    r"(?: (?P<frequency>Each [A-Za-z]+))?"
    r"(?: By (?P<due>.+))?$"
)

BALANCE_RE = re.compile(
    rf"^{re.escape(BALANCE_PREFIX)} (?P<amount>{AMOUNT_PATTERN}) By (?P<due>.+)$"
)

DUE_DATE_RE = re.compile(r"\b(\w+)\b (\d{4})")


@dataclass(frozen=True)
class Matched:
    descriptor: GoalDescriptor
    grammar: str


class Unmatched:
    def __repr__(self) -> str:
        return "UNMATCHED"


UNMATCHED = Unmatched()

ParseResult = Union[Matched, Unmatched]


def _amount(text: str) -> float:
    return float(text.replace(",", ""))


def _match_general(text: str) -> ParseResult:
    # balance goals carry a mandatory due date; keep them out of this grammar
    if text.startswith(BALANCE_PREFIX):
        return UNMATCHED
    m = GENERAL_RE.match(text)
    if not m:
        return UNMATCHED
    return Matched(
        GoalDescriptor(
            target_type=m.group("verb").strip(),
            target_amount=_amount(m.group("amount")),
            target_frequency=m.group("frequency") or NA,
            target_due_date=m.group("due") or NA,
        ),
        grammar="general",
    )


def _match_balance(text: str) -> ParseResult:
    if not text.startswith(BALANCE_PREFIX):
        return UNMATCHED
    m = BALANCE_RE.match(text)
    if not m:
        return UNMATCHED
    return Matched(
        GoalDescriptor(
            target_type=BALANCE_TARGET_TYPE,
            target_amount=_amount(m.group("amount")),
            target_frequency=NA,
            target_due_date=m.group("due"),
        ),
        grammar="balance",
    )


GRAMMARS: Tuple[Callable[[str], ParseResult], ...] = (_match_general, _match_balance)


def match_goal_text(goal_text: Optional[str]) -> ParseResult:
    text = normalize_spaces(goal_text or "")
    if not text or text == NA:
        return UNMATCHED
    for grammar in GRAMMARS:
        result = grammar(text)
        if isinstance(result, Matched):
            return result
    return UNMATCHED


def parse_goal_text(goal_text: Optional[str]) -> GoalDescriptor:
    result = match_goal_text(goal_text)
    if isinstance(result, Matched):
        return result.descriptor
    return NA_GOAL


def parse_due_date(value: Optional[str]) -> Optional[Tuple[int, int]]:
    """'March 2026' -> (3, 2026); None when no known month/year pair is found."""
    if not value or value == NA:
        return None
    m = DUE_DATE_RE.search(value)
    if not m:
        return None
    month = MONTHS.get(m.group(1).lower())
    if month is None:
        return None
    return month, int(m.group(2))


def compose_goal_text(behavior: Optional[str], by_date: Optional[str]) -> str:
    """Join the inspector's behavior line and its 'by date' line."""
    text = normalize_spaces(f"{behavior or ''} {by_date or ''}")
    return text or NA
