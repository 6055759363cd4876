from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Any, Mapping, Optional
from zoneinfo import ZoneInfo

from .core.constants import DEFAULT_TIMEZONE, DEFAULT_WORK_HOURS
from .core.enums import Sector
from .payroll.service import PayrollClosingService
from .schedules.model import WorkSchedule
from .snapshots.parser import parse_sector_work_hours, parse_work_hours
from .timebank.service import TimeBankService


@dataclass(frozen=True)
class Container:
    tz: Optional[tzinfo]
    default_schedule: WorkSchedule
    sector_schedules: dict[Sector, WorkSchedule]

    time_bank_service: TimeBankService
    payroll_closing_service: PayrollClosingService


def build_container(
    *,
    timezone: Optional[str] = DEFAULT_TIMEZONE,
    default_work_hours: Optional[Mapping[str, Any]] = None,
    sector_work_hours: Optional[Mapping[str, Any]] = None,
) -> Container:
    tz = ZoneInfo(timezone) if timezone else None
    default_schedule = parse_work_hours(default_work_hours or DEFAULT_WORK_HOURS)
    sector_schedules = parse_sector_work_hours(sector_work_hours or {})

    return Container(
        tz=tz,
        default_schedule=default_schedule,
        sector_schedules=sector_schedules,
        time_bank_service=TimeBankService(tz=tz),
        payroll_closing_service=PayrollClosingService(tz=tz),
    )
