from __future__ import annotations

from dataclasses import dataclass, field

from ..core.constants import VA_EMPLOYEE_SHARE, VT_SALARY_CAP_RATE
from ..core.enums import LineKind
from ..employees.model import Benefits
from .model import PayrollLineItem


@dataclass
class BenefitLines:
    earnings: list[PayrollLineItem] = field(default_factory=list)
    deductions: list[PayrollLineItem] = field(default_factory=list)
    # periculosidade + insalubridade, part of the INSS/FGTS base
    premiums: float = 0.0


def compute_benefits(
    benefits: Benefits,
    *,
    worked_days: int,
    salary_for_month: float,
    absence_deduction: float,
) -> BenefitLines:
    out = BenefitLines()

    if benefits.va_daily_value:
        va = benefits.va_daily_value * worked_days
        if va > 0:
            out.earnings.append(PayrollLineItem("Vale Alimentação (VA)", va))
            va_discount = va * VA_EMPLOYEE_SHARE
            if va_discount > 0:
                out.deductions.append(PayrollLineItem("Desconto Vale Alimentação", va_discount, LineKind.DEDUCTION))

    if benefits.vt_daily_value:
        vt = benefits.vt_daily_value * worked_days
        if vt > 0:
            out.earnings.append(PayrollLineItem("Vale Transporte (VT)", vt))
            # Cap: 6% of (salary for the month - absences), other lines ignored.
            vt_discount = min(vt, (salary_for_month - absence_deduction) * VT_SALARY_CAP_RATE)
            out.deductions.append(PayrollLineItem("Desconto VT (6%)", vt_discount, LineKind.DEDUCTION))

    if benefits.periculosidade_pct:
        value = salary_for_month * (benefits.periculosidade_pct / 100)
        out.earnings.append(PayrollLineItem("Periculosidade", value))
        out.premiums += value

    if benefits.insalubridade_pct:
        value = salary_for_month * (benefits.insalubridade_pct / 100)
        out.earnings.append(PayrollLineItem("Insalubridade", value))
        out.premiums += value

    return out
