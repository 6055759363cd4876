from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Mapping, Optional, Sequence

from ..core.enums import Sector
from ..employees.model import Employee
from .model import WorkSchedule


class ScheduleSource(ABC):
    """Strategy Pattern: one candidate place a work schedule can come from."""

    @abstractmethod
    def lookup(self, employee: Employee, on_date: date) -> Optional[WorkSchedule]:
        raise NotImplementedError


class EmployeeOverrideSource(ScheduleSource):
    def lookup(self, employee: Employee, on_date: date) -> Optional[WorkSchedule]:
        return employee.custom_work_hours


class SectorScheduleSource(ScheduleSource):
    def __init__(self, sector_schedules: Mapping[Sector, WorkSchedule]):
        self._sector_schedules = dict(sector_schedules)

    def lookup(self, employee: Employee, on_date: date) -> Optional[WorkSchedule]:
        if not employee.sector:
            return None
        return self._sector_schedules.get(employee.sector)


class CompanyDefaultSource(ScheduleSource):
    def __init__(self, company_default: WorkSchedule):
        self._company_default = company_default

    def lookup(self, employee: Employee, on_date: date) -> Optional[WorkSchedule]:
        return self._company_default


class ScheduleResolver:
    """Resolve the work schedule that applies to an employee on a date.

    Sources are tried in order and the first one returning a schedule wins:
    employee override, then sector schedule, then the company default.
    """

    def __init__(
        self,
        company_default: WorkSchedule,
        sector_schedules: Optional[Mapping[Sector, WorkSchedule]] = None,
        *,
        sources: Optional[Sequence[ScheduleSource]] = None,
    ):
        self._sources = tuple(sources) if sources is not None else (
            EmployeeOverrideSource(),
            SectorScheduleSource(sector_schedules or {}),
            CompanyDefaultSource(company_default),
        )

    def resolve(self, employee: Employee, on_date: date) -> WorkSchedule:
        for source in self._sources:
            schedule = source.lookup(employee, on_date)
            if schedule is not None:
                return schedule
        return WorkSchedule()
