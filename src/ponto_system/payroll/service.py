from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import tzinfo
from typing import Mapping, Optional

from ..attendance.aggregator import AttendanceAggregator
from ..core.constants import ALL_EMPLOYEES
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..snapshots.model import MonthlySnapshot
from .engine import PayrollEngine
from .model import PayrollResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClosingSelection:
    employee_id: str = ALL_EMPLOYEES
    sector: Optional[str] = None
    contract: Optional[str] = None


@dataclass(frozen=True)
class ClosingData:
    scope: str
    results: list[PayrollResult]


class PayrollClosingService:
    """Monthly payroll closing for one employee or a filtered group."""

    def __init__(self, *, engine: Optional[PayrollEngine] = None, tz: Optional[tzinfo] = None):
        self._engine = engine or PayrollEngine(AttendanceAggregator(tz))

    @staticmethod
    def select_employees(snapshot: MonthlySnapshot, selection: ClosingSelection) -> list[Employee]:
        if selection.employee_id != ALL_EMPLOYEES:
            employee = snapshot.find_employee(str(selection.employee_id))
            return [employee] if employee else []

        selected = [e for e in snapshot.employees if e.role == Role.EMPLOYEE]
        if selection.sector:
            selected = [e for e in selected if e.sector and e.sector.value == selection.sector]
        if selection.contract:
            needle = selection.contract.lower()
            selected = [e for e in selected if needle in (e.contract or "").lower()]
        return selected

    @staticmethod
    def scope_label(selection: ClosingSelection, employees: list[Employee]) -> str:
        if selection.employee_id != ALL_EMPLOYEES:
            return employees[0].name if employees else ""
        scopes = []
        if selection.sector:
            scopes.append(f"Setor {selection.sector}")
        if selection.contract:
            scopes.append(f"Contrato {selection.contract}")
        return " & ".join(scopes) if scopes else "Todos os Funcionários"

    def run_closing(
        self,
        snapshot: MonthlySnapshot,
        *,
        month: str,
        selection: Optional[ClosingSelection] = None,
        variable_deductions: Optional[Mapping[str, float]] = None,
    ) -> ClosingData:
        selection = selection or ClosingSelection()
        employees = self.select_employees(snapshot, selection)
        if not employees:
            raise ValidationError("Nenhum funcionário encontrado para os filtros selecionados.")

        variable_deductions = variable_deductions or {}
        logger.info("payroll closing %s: %d employee(s)", month, len(employees))

        # Each employee is computed independently from the same read-only snapshot.
        results = [
            self._engine.compute_payroll(
                employee,
                month,
                snapshot.punches,
                snapshot.justifications,
                variable_deduction=float(variable_deductions.get(employee.employee_id) or 0.0),
            )
            for employee in employees
        ]
        return ClosingData(scope=self.scope_label(selection, employees), results=results)
