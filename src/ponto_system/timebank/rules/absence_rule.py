from __future__ import annotations

from ...core.enums import Observation
from .base import DayFacts, ObservationRule


class AbsenceRule(ObservationRule):
    observation = Observation.ABSENCE

    def applies(self, facts: DayFacts) -> bool:
        return not facts.is_weekend and facts.worked_minutes == 0 and facts.expected_minutes > 0

    def balance(self, facts: DayFacts) -> int:
        return -facts.expected_minutes
