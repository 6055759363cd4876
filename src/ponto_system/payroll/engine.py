from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..attendance.aggregator import AttendanceAggregator
from ..attendance.model import ClockPunch
from ..common.datetime_utils import (
    count_business_days,
    count_sundays,
    days_in_month,
    month_name,
    parse_reference_month,
)
from ..core.constants import COMMERCIAL_MONTH_DAYS
from ..core.enums import LineKind
from ..employees.model import Employee
from ..justifications.model import Justification
from ..justifications.resolver import remove_justified, resolve_justified_days
from .benefits import compute_benefits
from .calculator.base import ContributionCalculator
from .calculator.flat_rate_calculator import FlatRateCalculator
from .calculator.progressive_calculator import ProgressiveInssCalculator
from .model import PayrollLineItem, PayrollResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContractPeriod:
    """Portion of the reference month covered by the employment contract."""

    start_day: int
    is_new_hire: bool
    not_yet_hired: bool = False


def contract_period(admission: Optional[date], year: int, month: int) -> ContractPeriod:
    if admission is None:
        return ContractPeriod(start_day=1, is_new_hire=False)
    if (admission.year, admission.month) > (year, month):
        return ContractPeriod(start_day=1, is_new_hire=False, not_yet_hired=True)
    if (admission.year, admission.month) == (year, month):
        return ContractPeriod(start_day=admission.day, is_new_hire=True)
    return ContractPeriod(start_day=1, is_new_hire=False)


class PayrollEngine:
    """Monthly earnings/deductions statement computed from attendance facts.

    Pure over its inputs: no I/O, nothing kept between calls.
    """

    def __init__(
        self,
        aggregator: Optional[AttendanceAggregator] = None,
        *,
        inss: Optional[ContributionCalculator] = None,
        fgts: Optional[ContributionCalculator] = None,
    ):
        self._aggregator = aggregator or AttendanceAggregator()
        self._inss = inss or ProgressiveInssCalculator()
        self._fgts = fgts or FlatRateCalculator()

    def compute_payroll(
        self,
        employee: Employee,
        month_str: str,
        punches: Iterable[ClockPunch],
        justifications: Iterable[Justification],
        variable_deduction: float = 0.0,
    ) -> PayrollResult:
        year, month = parse_reference_month(month_str)
        month_label = f"{month_name(month)} / {year}"
        base_salary = employee.base_salary or 0.0
        punches = list(punches)

        period = contract_period(employee.admission_date, year, month)
        if period.not_yet_hired:
            logger.debug("employee %s admitted after %s, zero payroll", employee.employee_id, month_str)
            return PayrollResult(
                employee_id=employee.employee_id,
                employee_name=employee.name,
                month_label=month_label,
                base_salary=base_salary,
                benefits=employee.benefits.active_labels(),
            )

        business_days = count_business_days(year, month, period.start_day)

        justified = resolve_justified_days(justifications, employee.employee_id, year, month)
        worked = remove_justified(
            self._aggregator.worked_days(punches, employee.employee_id, year, month),
            justified,
        )
        worked_days = len(worked)
        justified_days = len(justified)
        absent_days = max(0, business_days - worked_days - justified_days)

        daily_salary = base_salary / COMMERCIAL_MONTH_DAYS
        earnings: list[PayrollLineItem] = []
        deductions: list[PayrollLineItem] = []
        employer_charges: list[PayrollLineItem] = []

        salary_for_month = base_salary
        salary_description = "Salário Base"
        if period.is_new_hire:
            days_in_contract = days_in_month(year, month) - period.start_day + 1
            salary_for_month = daily_salary * days_in_contract
            salary_description = f"Salário Proporcional ({days_in_contract} dias)"
        earnings.append(PayrollLineItem(salary_description, salary_for_month))

        absence_deduction = 0.0
        if absent_days > 0:
            absence_deduction = daily_salary * absent_days
            deductions.append(PayrollLineItem(f"Faltas ({absent_days} dias)", absence_deduction, LineKind.DEDUCTION))

            # DSR: one extra day per absence, up to the Sundays of the month,
            # regardless of which week the absences fell in.
            dsr_days = min(absent_days, count_sundays(year, month))
            if dsr_days > 0:
                dsr_value = dsr_days * daily_salary
                deductions.append(PayrollLineItem("Desconto DSR s/ Faltas", dsr_value, LineKind.DEDUCTION))
                absence_deduction += dsr_value

        benefit_lines = compute_benefits(
            employee.benefits,
            worked_days=worked_days,
            salary_for_month=salary_for_month,
            absence_deduction=absence_deduction,
        )
        earnings.extend(benefit_lines.earnings)
        deductions.extend(benefit_lines.deductions)

        if variable_deduction and variable_deduction > 0:
            deductions.append(PayrollLineItem("Desconto Convênio", float(variable_deduction), LineKind.DEDUCTION))

        tax_base = (salary_for_month - absence_deduction) + benefit_lines.premiums

        inss = self._inss.compute(tax_base)
        if inss > 0:
            deductions.append(PayrollLineItem("INSS", inss, LineKind.DEDUCTION))

        fgts = self._fgts.compute(tax_base)
        if fgts > 0:
            employer_charges.append(PayrollLineItem("FGTS (8%)", fgts, LineKind.EMPLOYER_CHARGE))

        total_earnings = sum(i.value for i in earnings)
        total_deductions = sum(i.value for i in deductions)

        return PayrollResult(
            employee_id=employee.employee_id,
            employee_name=employee.name,
            month_label=month_label,
            base_salary=base_salary,
            benefits=employee.benefits.active_labels(),
            business_days=business_days,
            worked_days=worked_days,
            worked_hours=self._aggregator.worked_hours(punches, employee.employee_id, year, month),
            absent_days=absent_days,
            justified_days=justified_days,
            earnings=earnings,
            deductions=deductions,
            employer_charges=employer_charges,
            total_earnings=total_earnings,
            total_deductions=total_deductions,
            net_pay=max(0.0, total_earnings - total_deductions),
        )
