from __future__ import annotations

from .base import DayFacts, ObservationRule


class RegularRule(ObservationRule):
    """Fallback: plain worked - expected."""

    def applies(self, facts: DayFacts) -> bool:
        return True
