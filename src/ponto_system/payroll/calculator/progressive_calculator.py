from __future__ import annotations

from typing import Sequence

from ...core.constants import INSS_BRACKETS
from .base import ContributionCalculator


class ProgressiveInssCalculator(ContributionCalculator):
    """INSS: base * rate - deduction of the first bracket whose ceiling covers the base.

    Ceilings are inclusive. Above the last ceiling the contribution is capped
    at the value of the last bracket's ceiling.
    """

    def __init__(self, brackets: Sequence[tuple[float, float, float]] = INSS_BRACKETS):
        self._brackets = tuple(brackets)

    def compute(self, base: float) -> float:
        for ceiling, rate, deduction in self._brackets:
            if base <= ceiling:
                return base * rate - deduction
        ceiling, rate, deduction = self._brackets[-1]
        return ceiling * rate - deduction
