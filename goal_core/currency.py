"""
goal_core.currency
Money <-> text (two fraction digits, locale grouping).
"""
from __future__ import annotations
import math
import re
from typing import Tuple
from .config import CURRENCY_LOCALES, DEFAULT_CURRENCY_LOCALE
from .errors import ParseError

# what float() may see once symbols are stripped
PLAIN_DECIMAL_RE = re.compile(r"-?\d+(?:\.\d+)?")


def _symbols(locale: str) -> Tuple[str, str]:
    try:
        return CURRENCY_LOCALES[locale]
    except KeyError:
        raise ValueError(f"Unknown currency locale: {locale}") from None


def format_currency(amount: float, locale: str = DEFAULT_CURRENCY_LOCALE) -> str:
    """
    Render `amount` with exactly two fraction digits and thousands grouping.
    NaN/Infinity must be filtered out by the caller.
    """
    if not math.isfinite(amount):
        raise ValueError(f"Cannot format non-finite amount: {amount!r}")
    group_sym, dec_sym = _symbols(locale)
    s = f"{amount:,.2f}"
    if (group_sym, dec_sym) == (",", "."):
        return s
    return s.replace(",", "\0").replace(".", dec_sym).replace("\0", group_sym)


def parse_currency(text: str, locale: str = DEFAULT_CURRENCY_LOCALE) -> float:
    group_sym, dec_sym = _symbols(locale)
    s = ("" if text is None else str(text)).strip()
    neg = False
    if s.startswith("(") and s.endswith(")"):
        neg = True
        s = s[1:-1].strip()
    s = s.replace("$", "").replace(group_sym, "")
    if group_sym.isspace():
        s = s.replace("\u00a0", "").replace("\u202f", "")
    if dec_sym != ".":
        s = s.replace(dec_sym, ".")
    if not PLAIN_DECIMAL_RE.fullmatch(s):
        raise ParseError(f"Not a currency amount: {text!r}")
    n = float(s)
    return -n if neg else n


def fmt_money(n: float) -> str:
    return f"${n:,.2f}"
