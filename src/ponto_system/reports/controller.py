from __future__ import annotations

import csv
import io
import logging

from flask import Flask, jsonify, request

from ..common.formatting import format_date_br, format_hours, format_minutes
from ..common.validators import require_mapping
from ..container import Container
from ..core.constants import ALL_EMPLOYEES
from ..core.exceptions import ValidationError
from ..payroll.model import PayrollResult
from ..payroll.service import ClosingData, ClosingSelection
from ..snapshots.parser import parse_snapshot
from ..timebank.model import TimeBankReport

logger = logging.getLogger(__name__)


def _closing_row(result: PayrollResult, kind: str, description: str, value: str) -> dict:
    return {
        "employee_id": result.employee_id,
        "employee_name": result.employee_name,
        "month": result.month_label,
        "kind": kind,
        "description": description,
        "value": value,
    }


def register(app: Flask, container: Container) -> None:
    def _read_snapshot(body: dict):
        return parse_snapshot(
            body.get("snapshot") or {},
            default_schedule=container.default_schedule,
            default_sector_schedules=container.sector_schedules,
        )

    def _csv_response(*, fieldnames: list[str], rows: list[dict], filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=fieldnames)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    def _time_bank_csv(report: TimeBankReport, month: str):
        rows = [
            {
                "date": format_date_br(d.date),
                "day_of_week": d.day_of_week,
                "expected": format_minutes(d.expected_minutes),
                "worked": format_minutes(d.worked_minutes),
                "balance": format_minutes(d.balance),
                "observation": d.observation.value,
            }
            for d in report.daily_balances
        ]
        rows.append(
            {
                "date": "TOTAL",
                "day_of_week": "",
                "expected": format_minutes(report.total_expected),
                "worked": format_minutes(report.total_worked),
                "balance": format_minutes(report.total_balance),
                "observation": "",
            }
        )
        name = report.employee_name.replace(" ", "_") or "funcionario"
        return _csv_response(
            fieldnames=["date", "day_of_week", "expected", "worked", "balance", "observation"],
            rows=rows,
            filename=f"Banco_Horas_{name}_{month}.csv",
        )

    def _closing_csv(data: ClosingData, month: str):
        rows = []
        for result in data.results:
            for label, value in (
                ("Dias Úteis", str(result.business_days)),
                ("Dias Trabalhados", str(result.worked_days)),
                ("Horas Trabalhadas", format_hours(result.worked_hours)),
                ("Dias Justificados", str(result.justified_days)),
                ("Faltas", str(result.absent_days)),
                ("Benefícios", ", ".join(result.benefits)),
            ):
                rows.append(_closing_row(result, "summary", label, value))
            for item in [*result.earnings, *result.deductions, *result.employer_charges]:
                rows.append(_closing_row(result, item.kind.value, item.description, f"{item.value:.2f}"))
            for label, value in (
                ("Salário Bruto (Proventos)", result.total_earnings),
                ("Total de Descontos", result.total_deductions),
                ("LÍQUIDO A RECEBER", result.net_pay),
            ):
                rows.append(_closing_row(result, "total", label, f"{value:.2f}"))
        scope = data.scope.replace(" & ", "_").replace(" ", "_")
        return _csv_response(
            fieldnames=["employee_id", "employee_name", "month", "kind", "description", "value"],
            rows=rows,
            filename=f"Fechamento_Folha_{scope}_{month}.csv",
        )

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"success": True}), 200

    @app.route("/api/reports/time-bank", methods=["POST"], endpoint="time_bank_report")
    def time_bank_report():
        try:
            body = require_mapping(request.get_json(silent=True), "Corpo da requisição")
            month = str(body.get("month") or "")
            report = container.time_bank_service.generate(
                _read_snapshot(body),
                employee_id=str(body.get("employee_id") or ""),
                month=month,
            )
            if request.args.get("format") == "csv":
                return _time_bank_csv(report, month)
            return jsonify({"success": True, "report": report.to_dict()}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("time bank report failed")
            return jsonify({"success": False, "message": "Erro interno ao gerar banco de horas"}), 500

    @app.route("/api/payroll/closing", methods=["POST"], endpoint="payroll_closing")
    def payroll_closing():
        try:
            body = require_mapping(request.get_json(silent=True), "Corpo da requisição")
            month = str(body.get("month") or "")
            selection = ClosingSelection(
                employee_id=str(body.get("employee_id") or ALL_EMPLOYEES),
                sector=body.get("sector") or None,
                contract=body.get("contract") or None,
            )
            deductions = body.get("variable_deductions") or {}
            if not isinstance(deductions, dict):
                raise ValidationError("Descontos variáveis devem ser um objeto")
            try:
                deductions = {str(k): float(v or 0) for k, v in deductions.items()}
            except (TypeError, ValueError):
                raise ValidationError("Desconto de convênio deve ser numérico")

            data = container.payroll_closing_service.run_closing(
                _read_snapshot(body),
                month=month,
                selection=selection,
                variable_deductions=deductions,
            )
            if request.args.get("format") == "csv":
                return _closing_csv(data, month)
            return jsonify({"success": True, "scope": data.scope, "results": [r.to_dict() for r in data.results]}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("payroll closing failed")
            return jsonify({"success": False, "message": "Erro interno ao fechar a folha"}), 500
