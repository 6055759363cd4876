"""Turn the plain-data payload handed over by the storage collaborator into models.

Field names follow the records as stored (``salario_base``, ``data_admissao``,
``setor``, ``beneficios``...). Shape errors raise ValidationError here, so the
calculators only ever see well-formed snapshots.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..attendance.model import ClockPunch
from ..common.datetime_utils import parse_optional_date, parse_timestamp
from ..common.validators import require_list, require_mapping, require_non_empty, require_number
from ..core.enums import JustificationStatus, PunchKind, Role, Sector
from ..core.exceptions import ValidationError
from ..employees.model import Benefits, Employee
from ..justifications.model import Justification
from ..schedules.model import WorkSchedule
from .model import MonthlySnapshot

logger = logging.getLogger(__name__)


def parse_work_hours(data: Optional[Mapping[str, Any]]) -> Optional[WorkSchedule]:
    """Four-field 'HH:MM' object -> WorkSchedule; None stays None (no override)."""
    if data is None:
        return None
    data = require_mapping(data, "Jornada")
    return WorkSchedule(
        work_start=str(data.get("workStartTime") or ""),
        lunch_start=str(data.get("lunchStartTime") or ""),
        lunch_end=str(data.get("lunchEndTime") or ""),
        work_end=str(data.get("workEndTime") or ""),
    )


def parse_sector(value: Any) -> Optional[Sector]:
    if not value:
        return None
    try:
        return Sector(value)
    except ValueError:
        raise ValidationError(f"Setor inválido: {value}")


def parse_sector_work_hours(data: Optional[Mapping[str, Any]]) -> dict[Sector, WorkSchedule]:
    out = {}
    for key, hours in require_mapping(data, "Jornada por setor").items():
        sector = parse_sector(key)
        schedule = parse_work_hours(hours)
        if sector and schedule is not None:
            out[sector] = schedule
    return out


def _rate(block: Any, key: str) -> float:
    if not isinstance(block, dict):
        return 0.0
    return require_number(block.get(key), key)


def parse_benefits(data: Optional[Mapping[str, Any]]) -> Benefits:
    data = require_mapping(data, "Benefícios")
    return Benefits(
        vt_daily_value=_rate(data.get("vt"), "dailyValue"),
        va_daily_value=_rate(data.get("va"), "dailyValue"),
        periculosidade_pct=_rate(data.get("periculosidade"), "percentage"),
        insalubridade_pct=_rate(data.get("insalubridade"), "percentage"),
        salario_familia_pct=_rate(data.get("salario_familia"), "percentage"),
        adicional_noturno_pct=_rate(data.get("adicional_noturno"), "percentage"),
    )


def parse_employee(data: Mapping[str, Any]) -> Employee:
    data = require_mapping(data, "Funcionário")
    employee_id = require_non_empty(data.get("id"), "ID do funcionário")

    admission_raw = data.get("data_admissao")
    admission = parse_optional_date(admission_raw)
    if admission_raw and admission is None:
        logger.warning("employee %s: ignoring malformed admission date %r", employee_id, admission_raw)

    try:
        role = Role(data.get("role") or Role.EMPLOYEE.value)
    except ValueError:
        raise ValidationError(f"Papel inválido: {data.get('role')}")

    return Employee(
        employee_id=employee_id,
        name=str(data.get("name") or ""),
        base_salary=require_number(data.get("salario_base"), "Salário base"),
        admission_date=admission,
        sector=parse_sector(data.get("setor")),
        role=role,
        benefits=parse_benefits(data.get("beneficios")),
        custom_work_hours=parse_work_hours(data.get("custom_work_hours")),
        contract=str(data.get("contract") or ""),
        state=str(data.get("state") or ""),
        city=str(data.get("city") or ""),
        cargo=str(data.get("cargo") or ""),
    )


def parse_punch(data: Mapping[str, Any]) -> ClockPunch:
    data = require_mapping(data, "Registro de ponto")
    try:
        kind = PunchKind(data.get("type"))
    except ValueError:
        raise ValidationError(f"Tipo de registro inválido: {data.get('type')}")
    try:
        timestamp = parse_timestamp(require_non_empty(data.get("timestamp"), "Data/hora do registro"))
    except ValueError:
        raise ValidationError(f"Data/hora inválida: {data.get('timestamp')}")

    return ClockPunch(
        user_id=require_non_empty(data.get("user_id"), "Funcionário do registro"),
        kind=kind,
        timestamp=timestamp,
        punch_id=str(data["id"]) if data.get("id") is not None else None,
    )


def parse_justification(data: Mapping[str, Any]) -> Justification:
    data = require_mapping(data, "Justificativa")
    try:
        status = JustificationStatus(data.get("status") or JustificationStatus.PENDING.value)
    except ValueError:
        raise ValidationError(f"Status de justificativa inválido: {data.get('status')}")

    submitted = data.get("timestamp")
    return Justification(
        user_id=require_non_empty(data.get("user_id"), "Funcionário da justificativa"),
        status=status,
        start_date=parse_optional_date(data.get("start_date")),
        end_date=parse_optional_date(data.get("end_date")),
        time=data.get("time") or None,
        reason=str(data.get("reason") or ""),
        details=str(data.get("details") or ""),
        attachment=data.get("attachment") or None,
        submitted_at=parse_timestamp(submitted) if submitted else None,
        justification_id=str(data["id"]) if data.get("id") is not None else None,
    )


def parse_snapshot(
    payload: Mapping[str, Any],
    *,
    default_schedule: WorkSchedule,
    default_sector_schedules: Optional[Mapping[Sector, WorkSchedule]] = None,
) -> MonthlySnapshot:
    payload = require_mapping(payload, "Snapshot")

    company_raw = payload.get("company_settings", payload.get("companysettings"))
    company_schedule = parse_work_hours(company_raw) if company_raw is not None else default_schedule

    sectors_raw = payload.get("sector_work_hours", payload.get("sectorworkhours"))
    if sectors_raw is not None:
        sector_schedules = parse_sector_work_hours(sectors_raw)
    else:
        sector_schedules = dict(default_sector_schedules or {})

    return MonthlySnapshot(
        employees=[parse_employee(e) for e in require_list(payload.get("employees"), "Funcionários")],
        punches=[parse_punch(p) for p in require_list(payload.get("time_entries"), "Registros de ponto")],
        justifications=[
            parse_justification(j) for j in require_list(payload.get("justifications"), "Justificativas")
        ],
        company_schedule=company_schedule,
        sector_schedules=sector_schedules,
    )
