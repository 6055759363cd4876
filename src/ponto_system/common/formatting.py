from __future__ import annotations

from datetime import date


def format_minutes(total_minutes: float) -> str:
    """Signed minutes -> 'HH:MM' (e.g. -90 -> '-01:30')."""
    sign = "-" if total_minutes < 0 else ""
    absolute = int(round(abs(total_minutes)))
    hours, minutes = divmod(absolute, 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def format_currency(value: float) -> str:
    """BRL display: 1234.5 -> 'R$ 1.234,50'."""
    sign = "-" if value < 0 else ""
    text = f"{abs(value):,.2f}"
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {text}"


def format_date_br(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def format_hours(value: float) -> str:
    """Decimal hours with comma separator, as shown on the closing sheet."""
    return f"{value:.2f}".replace(".", ",")
