"""Formatting helpers shared by the invoice builder and renderer."""

from __future__ import annotations

from datetime import date
from typing import Any

DATE_FORMAT = "%b %d, %Y"
CURRENCY_SYMBOL = "$"


def fmt_money(amount: float, symbol: str = CURRENCY_SYMBOL) -> str:
    amount = round(amount, 2) + 0.0
    if amount < 0:
        return f"-{symbol}{-amount:,.2f}"
    return f"{symbol}{amount:,.2f}"


def fmt_qty(qty: Any) -> str:
    try:
        quantity = float(qty)
        if quantity.is_integer():
            return str(int(quantity))
        return str(quantity)
    except (TypeError, ValueError):
        return str(qty)


def safe_float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def fmt_date(value: date) -> str:
    """Format a date or datetime as 'Mar 14, 2025'."""
    return value.strftime(DATE_FORMAT)
