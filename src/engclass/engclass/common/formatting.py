from __future__ import annotations

from datetime import date


def format_vnd(amount: int) -> str:
    """Render an amount the way vi-VN currency formatting does: 150.000 ₫"""
    sign = "-" if amount < 0 else ""
    grouped = f"{abs(int(amount)):,}".replace(",", ".")
    return f"{sign}{grouped} ₫"


def format_vn_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def class_badge(name: str) -> str:
    return (name or "")[:2].upper()


_FORMULA_PREFIXES = ("=", "+", "-", "@", "\t", "\r")


def csv_safe(value):
    """Prefix text cells that spreadsheets would evaluate as a formula."""
    if isinstance(value, str) and value.startswith(_FORMULA_PREFIXES):
        return "'" + value
    return value
