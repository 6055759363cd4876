from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime, tzinfo
from typing import Iterable, Optional

from ..core.enums import PunchKind
from .model import ClockPunch, DayAttendance


class AttendanceAggregator:
    """Group raw clock punches into days and compute worked time.

    Pure function of the punch set: same punches, same output.
    """

    def __init__(self, tz: Optional[tzinfo] = None):
        self._tz = tz

    def local_time(self, timestamp: datetime) -> datetime:
        """Wall-clock time of a punch, comparable with every other punch.

        With a zone configured, naive timestamps are read as local to it and
        aware ones are converted. Without one, aware timestamps keep their
        own wall clock and drop the offset.
        """
        if self._tz is None:
            return timestamp.replace(tzinfo=None)
        if timestamp.tzinfo is None:
            return timestamp.replace(tzinfo=self._tz)
        return timestamp.astimezone(self._tz)

    def daily_records(
        self,
        punches: Iterable[ClockPunch],
        employee_id: str,
        year: int,
        month: int,
    ) -> dict[date, DayAttendance]:
        by_day: dict[date, list[ClockPunch]] = defaultdict(list)
        for punch in punches:
            if punch.user_id != employee_id:
                continue
            local = self.local_time(punch.timestamp)
            if local.year != year or local.month != month:
                continue
            by_day[local.date()].append(punch)

        records = {}
        for work_date in sorted(by_day):
            records[work_date] = self.pair_day(work_date, by_day[work_date])
        return records

    def pair_day(self, work_date: date, punches: Iterable[ClockPunch]) -> DayAttendance:
        """Pair the first punch of each kind (in time order) for one day."""
        first: dict[PunchKind, datetime] = {}
        for timestamp, kind in sorted((self.local_time(p.timestamp), p.kind) for p in punches):
            first.setdefault(kind, timestamp)

        entry = first.get(PunchKind.ENTRY)
        lunch_out = first.get(PunchKind.LUNCH_OUT)
        lunch_in = first.get(PunchKind.LUNCH_IN)
        exit_ = first.get(PunchKind.EXIT)

        worked = 0.0
        if entry and exit_:
            worked = (exit_ - entry).total_seconds()
            if lunch_out and lunch_in:
                worked -= max((lunch_in - lunch_out).total_seconds(), 0.0)
            worked = max(worked, 0.0)

        return DayAttendance(
            work_date=work_date,
            entry=entry,
            lunch_out=lunch_out,
            lunch_in=lunch_in,
            exit=exit_,
            worked_seconds=worked,
        )

    def aggregate(
        self,
        punches: Iterable[ClockPunch],
        employee_id: str,
        year: int,
        month: int,
    ) -> dict[date, int]:
        """Worked minutes per day that has at least one punch."""
        records = self.daily_records(punches, employee_id, year, month)
        return {d: r.worked_minutes for d, r in records.items()}

    def worked_days(
        self,
        punches: Iterable[ClockPunch],
        employee_id: str,
        year: int,
        month: int,
    ) -> set[date]:
        """Days with an Entry punch, with or without a matching Exit."""
        records = self.daily_records(punches, employee_id, year, month)
        return {d for d, r in records.items() if r.has_entry}

    def worked_hours(
        self,
        punches: Iterable[ClockPunch],
        employee_id: str,
        year: int,
        month: int,
    ) -> float:
        records = self.daily_records(punches, employee_id, year, month)
        return sum(r.worked_seconds for r in records.values()) / 3600
