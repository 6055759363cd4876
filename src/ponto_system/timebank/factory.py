from __future__ import annotations

from dataclasses import dataclass, field

from .rules.absence_rule import AbsenceRule
from .rules.base import DayFacts, ObservationRule
from .rules.justified_rule import JustifiedRule
from .rules.regular_rule import RegularRule
from .rules.weekend_overtime_rule import WeekendOvertimeRule


def _default_rules() -> tuple[ObservationRule, ...]:
    # Highest priority first.
    return (WeekendOvertimeRule(), JustifiedRule(), AbsenceRule(), RegularRule())


@dataclass
class ObservationRuleFactory:
    """Factory Pattern: pick the first rule (by priority) that applies to a day."""

    rules: tuple[ObservationRule, ...] = field(default_factory=_default_rules)

    def for_day(self, facts: DayFacts) -> ObservationRule:
        for rule in self.rules:
            if rule.applies(facts):
                return rule
        return RegularRule()
