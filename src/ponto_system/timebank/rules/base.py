from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...core.enums import Observation


@dataclass(frozen=True)
class DayFacts:
    is_weekend: bool
    is_justified: bool
    expected_minutes: int
    worked_minutes: int


class ObservationRule(ABC):
    """Strategy Pattern: classify a day and compute its balance."""

    observation: Observation = Observation.NONE

    @abstractmethod
    def applies(self, facts: DayFacts) -> bool:
        raise NotImplementedError

    def balance(self, facts: DayFacts) -> int:
        return facts.worked_minutes - facts.expected_minutes
