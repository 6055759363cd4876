from __future__ import annotations

from datetime import tzinfo
from typing import Optional

from ..attendance.aggregator import AttendanceAggregator
from ..core.exceptions import ValidationError
from ..schedules.resolver import ScheduleResolver
from ..snapshots.model import MonthlySnapshot
from .calculator import TimeBankCalculator
from .model import TimeBankReport


class TimeBankService:
    def __init__(self, *, tz: Optional[tzinfo] = None):
        self._aggregator = AttendanceAggregator(tz)

    def generate(self, snapshot: MonthlySnapshot, *, employee_id: str, month: str) -> TimeBankReport:
        employee = snapshot.find_employee(str(employee_id))
        if not employee:
            raise ValidationError("Funcionário não encontrado")

        resolver = ScheduleResolver(snapshot.company_schedule, snapshot.sector_schedules)
        calculator = TimeBankCalculator(resolver, self._aggregator)
        return calculator.generate_report(employee, month, snapshot.punches, snapshot.justifications)
