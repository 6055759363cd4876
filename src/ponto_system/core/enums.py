from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Papel do usuário no cadastro."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class Sector(str, Enum):
    ADMINISTRATIVO = "Administrativo"
    OPERACIONAL = "Operacional"
    TECNICO = "Técnico"
    COMERCIAL = "Comercial"
    FINANCEIRO = "Financeiro"


class PunchKind(str, Enum):
    """Tipo de batida registrada no relógio de ponto."""

    ENTRY = "Entrada"
    LUNCH_OUT = "Saída Almoço"
    LUNCH_IN = "Retorno Almoço"
    EXIT = "Saída"


class JustificationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Observation(str, Enum):
    """Observação de um dia no banco de horas.

    Priority when several apply: WEEKEND_OVERTIME > JUSTIFIED > ABSENCE > NONE.
    """

    NONE = ""
    WEEKEND_OVERTIME = "Hora Extra (Fim de Semana)"
    JUSTIFIED = "Dia Justificado"
    ABSENCE = "Falta"


class LineKind(str, Enum):
    EARNING = "earning"
    DEDUCTION = "deduction"
    EMPLOYER_CHARGE = "employer_charge"
