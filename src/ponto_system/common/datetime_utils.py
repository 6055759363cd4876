from __future__ import annotations

from calendar import monthrange
from datetime import date, datetime, timedelta
from typing import Iterator, Optional

from ..core.exceptions import ValidationError

MONTH_NAMES_PT = (
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
)

# date.weekday(): 0=segunda ... 6=domingo
WEEKDAY_SHORT_PT = ("seg.", "ter.", "qua.", "qui.", "sex.", "sáb.", "dom.")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    """Lenient variant: empty or malformed input yields None."""
    if not value:
        return None
    try:
        return parse_iso_date(str(value)[:10])
    except ValueError:
        return None


def parse_timestamp(value) -> datetime:
    """Parse an ISO datetime; accepts a trailing 'Z' for UTC."""
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def parse_reference_month(value: str) -> tuple[int, int]:
    """Parse a 'YYYY-MM' reference month into (year, month)."""
    try:
        parsed = datetime.strptime((value or "").strip(), "%Y-%m")
    except ValueError:
        raise ValidationError(f"Mês de referência inválido: {value!r} (esperado YYYY-MM)")
    return parsed.year, parsed.month


def parse_hhmm(value: Optional[str]) -> Optional[int]:
    """'HH:MM' -> minutes since midnight; None when empty or malformed."""
    if not value or ":" not in value:
        return None
    hours, _, minutes = value.strip().partition(":")
    try:
        return int(hours) * 60 + int(minutes[:2])
    except ValueError:
        return None


def days_in_month(year: int, month: int) -> int:
    return monthrange(year, month)[1]


def iter_month_days(year: int, month: int, start_day: int = 1) -> Iterator[date]:
    for day in range(start_day, days_in_month(year, month) + 1):
        yield date(year, month, day)


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5


def count_business_days(year: int, month: int, start_day: int = 1) -> int:
    """Weekdays (Mon-Fri) from start_day through the end of the month."""
    return sum(1 for d in iter_month_days(year, month, start_day) if not is_weekend(d))


def count_sundays(year: int, month: int) -> int:
    return sum(1 for d in iter_month_days(year, month) if d.weekday() == 6)


def date_range(start: date, end: date) -> Iterator[date]:
    """Inclusive range; empty when end < start."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def month_name(month: int) -> str:
    return MONTH_NAMES_PT[month - 1].capitalize()


def weekday_short(day: date) -> str:
    return WEEKDAY_SHORT_PT[day.weekday()]
