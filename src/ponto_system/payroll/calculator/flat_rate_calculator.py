from __future__ import annotations

from ...core.constants import FGTS_RATE
from .base import ContributionCalculator


class FlatRateCalculator(ContributionCalculator):
    """Single rate over the base (FGTS by default)."""

    def __init__(self, rate: float = FGTS_RATE):
        self.rate = rate

    def compute(self, base: float) -> float:
        return base * self.rate
