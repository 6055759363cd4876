from __future__ import annotations

from abc import ABC, abstractmethod


class ContributionCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll contributions)."""

    @abstractmethod
    def compute(self, base: float) -> float:
        raise NotImplementedError
