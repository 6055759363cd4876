from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..attendance.model import ClockPunch
from ..core.enums import Sector
from ..employees.model import Employee
from ..justifications.model import Justification
from ..schedules.model import WorkSchedule


@dataclass(frozen=True)
class MonthlySnapshot:
    """In-memory, already-fetched records of one organization for a calculation run."""

    employees: list[Employee] = field(default_factory=list)
    punches: list[ClockPunch] = field(default_factory=list)
    justifications: list[Justification] = field(default_factory=list)
    company_schedule: WorkSchedule = field(default_factory=WorkSchedule)
    sector_schedules: dict[Sector, WorkSchedule] = field(default_factory=dict)

    def find_employee(self, employee_id: str) -> Optional[Employee]:
        for employee in self.employees:
            if employee.employee_id == employee_id:
                return employee
        return None
