"""
goal_core.annualize
Goal -> yearly contribution.
"""
from __future__ import annotations
import math
from datetime import datetime
from typing import Tuple, Union
from .config import BALANCE_TARGET_TYPE, FREQUENCY_MULTIPLIERS, NA
from .models import GoalDescriptor
from .parsing import parse_due_date

AnnualTotal = Union[float, str]


def months_remaining(due: Tuple[int, int], now: datetime) -> int:
    month, year = due
    return (year - now.year) * 12 + (month - now.month)


def annual_total(goal: GoalDescriptor, current_balance: float = 0.0, *, now: datetime) -> AnnualTotal:
    """
    Yearly amount a category needs to stay on track, or "N/A".

    Recurring goals scale by their frequency. A "Have a Balance" goal with a
    due date spreads what is still missing over the whole months left, then
    scales it to a year. Other goals with only a due date are "N/A".
    """
    amount = goal.target_amount
    if isinstance(amount, str) or not math.isfinite(amount) or amount <= 0:
        return NA

    frequency = goal.target_frequency
    if frequency != NA:
        multiplier = FREQUENCY_MULTIPLIERS.get(frequency)
        if multiplier is None:
            return NA
        return amount * multiplier

    if goal.target_type != BALANCE_TARGET_TYPE:
        return NA
    due = parse_due_date(goal.target_due_date)
    if due is None:
        return NA
    months = months_remaining(due, now)
    if months <= 0:
        return NA
    return ((amount - current_balance) / months) * 12
