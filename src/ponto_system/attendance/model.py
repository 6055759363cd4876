from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import PunchKind


@dataclass(frozen=True)
class ClockPunch:
    """Entidade de domínio: batida de ponto (imutável, produzida externamente)."""

    user_id: str
    kind: PunchKind
    timestamp: datetime
    punch_id: Optional[str] = None


@dataclass(frozen=True)
class DayAttendance:
    """Batidas pareadas de um dia (primeira de cada tipo)."""

    work_date: date
    entry: Optional[datetime]
    lunch_out: Optional[datetime]
    lunch_in: Optional[datetime]
    exit: Optional[datetime]
    worked_seconds: float

    @property
    def worked_minutes(self) -> int:
        # half-up, as the time-bank sheet displays it
        return int(self.worked_seconds / 60 + 0.5)

    @property
    def has_entry(self) -> bool:
        return self.entry is not None
