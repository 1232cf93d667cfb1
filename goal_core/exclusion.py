"""
goal_core.exclusion
Name-based skipping and display redaction.
"""
from __future__ import annotations
from typing import Iterable
from .config import DEFAULT_EXCLUSIONS, REDACTION_MARKER, REDACTION_PLACEHOLDER


def is_excluded(name: str, exclusions: Iterable[str] = DEFAULT_EXCLUSIONS) -> bool:
    name = name or ""
    return any(marker in name for marker in exclusions)


def redact_name(name: str, marker: str = REDACTION_MARKER, placeholder: str = REDACTION_PLACEHOLDER) -> str:
    if marker and marker in (name or ""):
        return placeholder
    return name
