from __future__ import annotations

from ...core.enums import Observation
from .base import DayFacts, ObservationRule


class JustifiedRule(ObservationRule):
    """Approved justification: the day neither owes nor earns minutes."""

    observation = Observation.JUSTIFIED

    def applies(self, facts: DayFacts) -> bool:
        return facts.is_justified

    def balance(self, facts: DayFacts) -> int:
        return 0
