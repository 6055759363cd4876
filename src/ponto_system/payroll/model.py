from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import LineKind


@dataclass(frozen=True)
class PayrollLineItem:
    description: str
    value: float
    kind: LineKind = LineKind.EARNING

    def to_dict(self) -> dict:
        return {"description": self.description, "value": self.value, "kind": self.kind.value}


@dataclass(frozen=True)
class PayrollResult:
    """Demonstrativo de proventos e descontos de um colaborador no mês."""

    employee_id: str
    employee_name: str
    month_label: str
    base_salary: float
    business_days: int = 0
    worked_days: int = 0
    worked_hours: float = 0.0
    absent_days: int = 0
    justified_days: int = 0
    benefits: list[str] = field(default_factory=list)
    earnings: list[PayrollLineItem] = field(default_factory=list)
    deductions: list[PayrollLineItem] = field(default_factory=list)
    employer_charges: list[PayrollLineItem] = field(default_factory=list)
    total_earnings: float = 0.0
    total_deductions: float = 0.0
    net_pay: float = 0.0

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "month_label": self.month_label,
            "base_salary": self.base_salary,
            "business_days": self.business_days,
            "worked_days": self.worked_days,
            "worked_hours": self.worked_hours,
            "absent_days": self.absent_days,
            "justified_days": self.justified_days,
            "benefits": list(self.benefits),
            "earnings": [i.to_dict() for i in self.earnings],
            "deductions": [i.to_dict() for i in self.deductions],
            "employer_charges": [i.to_dict() for i in self.employer_charges],
            "total_earnings": self.total_earnings,
            "total_deductions": self.total_deductions,
            "net_pay": self.net_pay,
        }
