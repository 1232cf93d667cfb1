"""
goal_core.errors
Exceptions raised across modules.
"""
from __future__ import annotations


class GoalExportError(ValueError):
    pass


class ParseError(GoalExportError):
    """A value that must already be numeric could not be read as a number."""


class DuplicateRecordError(GoalExportError):
    """The same category reached the report builder twice in one run."""

    def __init__(self, group_name: str, category_name: str):
        super().__init__(f"Category presented twice: {group_name!r} / {category_name!r}")
        self.group_name = group_name
        self.category_name = category_name
