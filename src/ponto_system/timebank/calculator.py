from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..attendance.aggregator import AttendanceAggregator
from ..attendance.model import ClockPunch
from ..common.datetime_utils import is_weekend, iter_month_days, month_name, parse_reference_month, weekday_short
from ..employees.model import Employee
from ..justifications.model import Justification
from ..justifications.resolver import resolve_justified_days
from ..schedules.resolver import ScheduleResolver
from .factory import ObservationRuleFactory
from .model import DailyBalance, TimeBankReport
from .rules.base import DayFacts

logger = logging.getLogger(__name__)


class TimeBankCalculator:
    """Daily expected-vs-worked ledger for one employee and one month."""

    def __init__(
        self,
        resolver: ScheduleResolver,
        aggregator: Optional[AttendanceAggregator] = None,
        *,
        rule_factory: Optional[ObservationRuleFactory] = None,
    ):
        self._resolver = resolver
        self._aggregator = aggregator or AttendanceAggregator()
        self._rules = rule_factory or ObservationRuleFactory()

    def generate_report(
        self,
        employee: Employee,
        month_str: str,
        punches: Iterable[ClockPunch],
        justifications: Iterable[Justification],
    ) -> TimeBankReport:
        year, month = parse_reference_month(month_str)
        worked_by_day = self._aggregator.aggregate(punches, employee.employee_id, year, month)
        justified = resolve_justified_days(justifications, employee.employee_id, year, month)

        daily: list[DailyBalance] = []
        for day in iter_month_days(year, month):
            weekend = is_weekend(day)
            worked = worked_by_day.get(day, 0)
            # Idle weekends stay out of the table.
            if weekend and worked <= 0:
                continue

            expected = 0 if weekend else self._resolver.resolve(employee, day).expected_minutes()
            facts = DayFacts(
                is_weekend=weekend,
                is_justified=day in justified,
                expected_minutes=expected,
                worked_minutes=worked,
            )
            rule = self._rules.for_day(facts)
            daily.append(
                DailyBalance(
                    date=day,
                    day_of_week=weekday_short(day),
                    expected_minutes=expected,
                    worked_minutes=worked,
                    balance=rule.balance(facts),
                    observation=rule.observation,
                )
            )

        logger.debug("time bank for %s (%s): %d days", employee.employee_id, month_str, len(daily))
        return TimeBankReport(
            employee_name=employee.name,
            period=f"{month_name(month)}/{year}",
            total_expected=sum(d.expected_minutes for d in daily),
            total_worked=sum(d.worked_minutes for d in daily),
            total_balance=sum(d.balance for d in daily),
            daily_balances=daily,
        )
