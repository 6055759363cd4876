"""Exemplo: fechamento de folha usando a camada de serviços (sem Flask).

Lê um snapshot JSON exportado do backend e imprime o líquido de cada colaborador.
"""

import importlib
import json
import sys
from pathlib import Path

from config import get_settings_module

from ponto_system.common.formatting import format_currency
from ponto_system.container import build_container
from ponto_system.payroll.service import ClosingSelection
from ponto_system.snapshots.parser import parse_snapshot


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        timezone=settings.TIMEZONE,
        default_work_hours=settings.DEFAULT_WORK_HOURS,
        sector_work_hours=settings.SECTOR_WORK_HOURS,
    )

    path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).with_name("sample_snapshot.json")
    payload = json.loads(path.read_text(encoding="utf-8"))
    snapshot = parse_snapshot(
        payload,
        default_schedule=container.default_schedule,
        default_sector_schedules=container.sector_schedules,
    )

    data = container.payroll_closing_service.run_closing(
        snapshot, month=payload.get("month", "2024-09"), selection=ClosingSelection()
    )
    print(data.scope)
    for result in data.results:
        print(f"{result.employee_name}: {format_currency(result.net_pay)}")


if __name__ == "__main__":
    main()
