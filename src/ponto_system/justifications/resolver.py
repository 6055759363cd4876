from __future__ import annotations

from datetime import date
from typing import Iterable

from ..common.datetime_utils import date_range, days_in_month
from ..core.enums import JustificationStatus
from .model import Justification


def resolve_justified_days(
    justifications: Iterable[Justification],
    employee_id: str,
    year: int,
    month: int,
) -> set[date]:
    """Approved justification ranges of one employee, clipped to the month and expanded."""
    first_day = date(year, month, 1)
    last_day = date(year, month, days_in_month(year, month))

    days: set[date] = set()
    for j in justifications:
        if j.user_id != employee_id:
            continue
        if j.status != JustificationStatus.APPROVED or not j.start_date:
            continue
        end = j.end_date or j.start_date
        days.update(date_range(max(j.start_date, first_day), min(end, last_day)))
    return days


def remove_justified(worked_days: Iterable[date], justified_days: set[date]) -> set[date]:
    """A justified day is never also tallied as worked.

    Only the classification changes; worked minutes for that day are kept elsewhere.
    """
    return {d for d in worked_days if d not in justified_days}
