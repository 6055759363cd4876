from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import parse_hhmm


@dataclass(frozen=True)
class WorkSchedule:
    """Jornada de trabalho: quatro horários 'HH:MM' (podem vir vazios)."""

    work_start: str = ""
    lunch_start: str = ""
    lunch_end: str = ""
    work_end: str = ""

    def expected_minutes(self) -> int:
        """Expected minutes for a working day.

        Empty or malformed work start/end yields 0; inverted intervals count as 0.
        """
        start = parse_hhmm(self.work_start)
        end = parse_hhmm(self.work_end)
        if start is None or end is None:
            return 0

        lunch_start = parse_hhmm(self.lunch_start)
        lunch_end = parse_hhmm(self.lunch_end)
        lunch = 0
        if lunch_start is not None and lunch_end is not None:
            lunch = max(lunch_end - lunch_start, 0)

        return max(max(end - start, 0) - lunch, 0)
