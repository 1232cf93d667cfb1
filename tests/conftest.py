"""Shared fixtures: a fixed clock and a small budget screen."""

from datetime import datetime

import pytest

from goal_core.config import ReportSettings
from goal_core.models import RawCategoryRecord


NOW = datetime(2026, 1, 15)


def _category(group, name, goal="N/A", balance=0.0):
    return RawCategoryRecord(group_name=group, category_name=name, goal_text=goal, current_balance=balance)


@pytest.fixture
def category():
    """Factory for one category record: category(group, name, goal, balance)."""
    return _category


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def settings():
    return ReportSettings(now=NOW)


@pytest.fixture
def sample_records():
    """
    Row numbers once built (header=1, info=2):
      3 Bills, 4 Rent, 5 Phone, 6 Misc, 7 Bills TOTAL,
      8 Savings, 9 Vacation, 10 Redacted, 11 Savings TOTAL, 12 GRAND TOTAL
    """
    return [
        _category("N/A", "Stray", "Spend 99.00 Each Month"),
        RawCategoryRecord.group("Bills"),
        _category("Bills", "Rent", "Spend 1,000.00 Each Month"),
        _category("Bills", "Phone", "Spend 50.00 Each Month"),
        _category("Bills", "Misc"),
        RawCategoryRecord.group("Credit Card Payments"),
        _category("Credit Card Payments", "Visa", "Spend 100.00 Each Month"),
        RawCategoryRecord.group("Savings"),
        _category("Savings", "Vacation", "Have a Balance of 2,400.00 By January 2027", balance=1200.0),
        _category("Savings", "Gifts NoExport", "Spend 75.00 Each Month"),
        _category("Savings", "Redact Therapy", "Spend 10.00 Each Week"),
    ]
