from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..common.formatting import format_date_br, format_minutes
from ..core.enums import Observation


@dataclass(frozen=True)
class DailyBalance:
    """Fato diário derivado (não persistido)."""

    date: date
    day_of_week: str
    expected_minutes: int
    worked_minutes: int
    balance: int
    observation: Observation = Observation.NONE

    def to_dict(self) -> dict:
        return {
            "date": format_date_br(self.date),
            "iso_date": self.date.isoformat(),
            "day_of_week": self.day_of_week,
            "expected_minutes": self.expected_minutes,
            "worked_minutes": self.worked_minutes,
            "balance": self.balance,
            "expected": format_minutes(self.expected_minutes),
            "worked": format_minutes(self.worked_minutes),
            "balance_hours": format_minutes(self.balance),
            "observation": self.observation.value,
        }


@dataclass(frozen=True)
class TimeBankReport:
    employee_name: str
    period: str
    total_expected: int
    total_worked: int
    total_balance: int
    daily_balances: list[DailyBalance] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "employee_name": self.employee_name,
            "period": self.period,
            "total_expected": self.total_expected,
            "total_worked": self.total_worked,
            "total_balance": self.total_balance,
            "daily_balances": [d.to_dict() for d in self.daily_balances],
        }
