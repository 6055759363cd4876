from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import Role, Sector
from ..schedules.model import WorkSchedule


@dataclass(frozen=True)
class Benefits:
    """Configuração de benefícios do colaborador.

    VT/VA are daily values (BRL); the others are percentages of the salary.
    """

    vt_daily_value: float = 0.0
    va_daily_value: float = 0.0
    periculosidade_pct: float = 0.0
    insalubridade_pct: float = 0.0
    salario_familia_pct: float = 0.0
    adicional_noturno_pct: float = 0.0

    def active_labels(self) -> list[str]:
        labels = []
        if self.vt_daily_value:
            labels.append("VT")
        if self.va_daily_value:
            labels.append("VA")
        if self.periculosidade_pct:
            labels.append("Periculosidade")
        if self.insalubridade_pct:
            labels.append("Insalubridade")
        if self.salario_familia_pct:
            labels.append("Salário Família")
        if self.adicional_noturno_pct:
            labels.append("Ad. Noturno")
        return labels


@dataclass(frozen=True)
class Employee:
    """Entidade de domínio: Colaborador (dados cadastrais e contratuais).

    `custom_work_hours` is None when the employee has no override; a schedule
    with empty strings is still an override.
    """

    employee_id: str
    name: str
    base_salary: float = 0.0
    admission_date: Optional[date] = None
    sector: Optional[Sector] = None
    role: Role = Role.EMPLOYEE
    benefits: Benefits = field(default_factory=Benefits)
    custom_work_hours: Optional[WorkSchedule] = None
    contract: str = ""
    state: str = ""
    city: str = ""
    cargo: str = ""
