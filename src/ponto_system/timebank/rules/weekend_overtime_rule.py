from __future__ import annotations

from ...core.enums import Observation
from .base import DayFacts, ObservationRule


class WeekendOvertimeRule(ObservationRule):
    """Worked on Saturday/Sunday: everything is overtime."""

    observation = Observation.WEEKEND_OVERTIME

    def applies(self, facts: DayFacts) -> bool:
        return facts.is_weekend and facts.worked_minutes > 0
