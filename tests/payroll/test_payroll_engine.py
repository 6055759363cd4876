from datetime import date, datetime, timedelta

import pytest

from ponto_system.attendance.model import ClockPunch
from ponto_system.core.enums import JustificationStatus, LineKind, PunchKind
from ponto_system.employees.model import Benefits, Employee
from ponto_system.justifications.model import Justification
from ponto_system.payroll.engine import PayrollEngine, contract_period

MONTH = "2024-09"  # 30 days, 21 weekdays, 5 Sundays


def _weekdays(start_day=1, skip=()):
    day = date(2024, 9, start_day)
    while day.month == 9:
        if day.weekday() < 5 and day.day not in skip:
            yield day
        day += timedelta(days=1)


def _entries(days):
    """Entry + Exit (8h) on each given day."""
    punches = []
    for d in days:
        punches.append(ClockPunch(user_id="1", kind=PunchKind.ENTRY, timestamp=datetime(d.year, d.month, d.day, 8)))
        punches.append(ClockPunch(user_id="1", kind=PunchKind.EXIT, timestamp=datetime(d.year, d.month, d.day, 16)))
    return punches


def _employee(**kwargs):
    kwargs.setdefault("base_salary", 3000.0)
    kwargs.setdefault("admission_date", date(2020, 1, 6))
    return Employee(employee_id="1", name="Ana Souza", **kwargs)


def _lines(items):
    return {i.description: i.value for i in items}


def test_no_punches_means_every_business_day_is_an_absence():
    result = PayrollEngine().compute_payroll(_employee(), MONTH, [], [])

    assert result.business_days == 21
    assert result.worked_days == 0
    assert result.absent_days == 21
    deductions = _lines(result.deductions)
    assert deductions["Faltas (21 dias)"] == pytest.approx(100.0 * 21)
    # DSR: min(21 absences, 5 Sundays) extra days
    assert deductions["Desconto DSR s/ Faltas"] == pytest.approx(100.0 * 5)
    # base 3000 - 2600 = 400 -> 7.5%
    assert deductions["INSS"] == pytest.approx(30.0)
    assert _lines(result.employer_charges)["FGTS (8%)"] == pytest.approx(32.0)
    assert result.total_deductions == pytest.approx(2630.0)
    assert result.net_pay == pytest.approx(370.0)


def test_full_attendance_has_no_absence_lines():
    result = PayrollEngine().compute_payroll(_employee(), MONTH, _entries(_weekdays()), [])

    assert result.worked_days == 21
    assert result.absent_days == 0
    assert result.worked_hours == pytest.approx(21 * 8)
    assert [i.description for i in result.earnings] == ["Salário Base"]
    assert [i.description for i in result.deductions] == ["INSS"]
    assert result.month_label == "Setembro / 2024"


def test_dsr_is_min_of_absences_and_sundays():
    # Documented approximation: the extra DSR day does not check which week the absence fell in.
    result = PayrollEngine().compute_payroll(_employee(), MONTH, _entries(_weekdays(skip=(10, 24))), [])

    deductions = _lines(result.deductions)
    assert result.absent_days == 2
    assert deductions["Faltas (2 dias)"] == pytest.approx(200.0)
    assert deductions["Desconto DSR s/ Faltas"] == pytest.approx(200.0)


def test_new_hire_is_prorated():
    emp = _employee(admission_date=date(2024, 9, 15))

    result = PayrollEngine().compute_payroll(emp, MONTH, _entries(_weekdays(start_day=15)), [])

    assert _lines(result.earnings) == {"Salário Proporcional (16 dias)": pytest.approx(1600.0)}
    assert result.business_days == 11
    assert result.absent_days == 0
    assert _lines(result.deductions)["INSS"] == pytest.approx(1600 * 0.09 - 21.18)
    assert _lines(result.employer_charges)["FGTS (8%)"] == pytest.approx(128.0)
    assert result.net_pay == pytest.approx(1600 - (1600 * 0.09 - 21.18))


def test_not_yet_hired_returns_zero_result():
    emp = _employee(admission_date=date(2024, 10, 1))

    result = PayrollEngine().compute_payroll(emp, MONTH, _entries(_weekdays()), [])

    assert result.business_days == 0
    assert result.earnings == []
    assert result.deductions == []
    assert result.employer_charges == []
    assert result.net_pay == 0.0
    assert result.base_salary == 3000.0


def test_admitted_in_earlier_month_is_not_prorated():
    periods = contract_period(date(2024, 8, 20), 2024, 9)

    assert periods.start_day == 1
    assert not periods.is_new_hire
    assert contract_period(None, 2024, 9).start_day == 1


def test_va_and_vt_benefits():
    emp = _employee(benefits=Benefits(va_daily_value=25.0, vt_daily_value=12.0))

    result = PayrollEngine().compute_payroll(emp, MONTH, _entries(_weekdays()), [])

    earnings = _lines(result.earnings)
    deductions = _lines(result.deductions)
    assert earnings["Vale Alimentação (VA)"] == pytest.approx(525.0)
    assert deductions["Desconto Vale Alimentação"] == pytest.approx(57.75)
    assert earnings["Vale Transporte (VT)"] == pytest.approx(252.0)
    # capped at 6% of 3000
    assert deductions["Desconto VT (6%)"] == pytest.approx(180.0)
    assert result.total_earnings == pytest.approx(3777.0)
    assert result.net_pay == pytest.approx(3777.0 - 57.75 - 180.0 - (3000 * 0.12 - 101.18))


def test_vt_discount_below_cap_takes_full_value():
    emp = _employee(benefits=Benefits(vt_daily_value=5.0))

    result = PayrollEngine().compute_payroll(emp, MONTH, _entries(_weekdays()), [])

    assert _lines(result.deductions)["Desconto VT (6%)"] == pytest.approx(105.0)


def test_no_benefit_lines_without_worked_days():
    emp = _employee(benefits=Benefits(va_daily_value=25.0, vt_daily_value=12.0))

    result = PayrollEngine().compute_payroll(emp, MONTH, [], [])

    assert "Vale Alimentação (VA)" not in _lines(result.earnings)
    assert "Vale Transporte (VT)" not in _lines(result.earnings)


def test_hazard_premiums_enter_tax_base():
    emp = _employee(base_salary=2000.0, benefits=Benefits(periculosidade_pct=30.0, insalubridade_pct=10.0))

    result = PayrollEngine().compute_payroll(emp, MONTH, _entries(_weekdays()), [])

    earnings = _lines(result.earnings)
    assert earnings["Periculosidade"] == pytest.approx(600.0)
    assert earnings["Insalubridade"] == pytest.approx(200.0)
    # base 2800
    assert _lines(result.deductions)["INSS"] == pytest.approx(2800 * 0.12 - 101.18)
    assert _lines(result.employer_charges)["FGTS (8%)"] == pytest.approx(224.0)


def test_convenio_deduction_before_inss():
    result = PayrollEngine().compute_payroll(_employee(), MONTH, _entries(_weekdays()), [], variable_deduction=150.0)

    assert [i.description for i in result.deductions] == ["Desconto Convênio", "INSS"]
    assert result.deductions[0].value == 150.0
    assert result.deductions[0].kind == LineKind.DEDUCTION


def test_justification_overrides_worked_day_tally():
    justification = Justification(
        user_id="1", status=JustificationStatus.APPROVED, start_date=date(2024, 9, 2), end_date=date(2024, 9, 6)
    )

    result = PayrollEngine().compute_payroll(_employee(), MONTH, _entries(_weekdays()), [justification])

    assert result.worked_days == 16
    assert result.justified_days == 5
    assert result.absent_days == 0
    # raw hours are still reported
    assert result.worked_hours == pytest.approx(21 * 8)


def test_justified_weekend_days_count_as_justified():
    justification = Justification(
        user_id="1", status=JustificationStatus.APPROVED, start_date=date(2024, 9, 6), end_date=date(2024, 9, 9)
    )

    result = PayrollEngine().compute_payroll(_employee(), MONTH, [], [justification])

    assert result.justified_days == 4
    assert result.absent_days == 17


def test_net_pay_never_negative():
    emp = _employee(base_salary=0.0)

    result = PayrollEngine().compute_payroll(emp, MONTH, [], [], variable_deduction=500.0)

    assert result.total_deductions == pytest.approx(500.0)
    assert result.net_pay == 0.0
    assert result.employer_charges == []


def test_result_lists_active_benefits():
    emp = _employee(benefits=Benefits(vt_daily_value=12.0, insalubridade_pct=10.0))

    result = PayrollEngine().compute_payroll(emp, MONTH, _entries(_weekdays()), [])

    assert result.benefits == ["VT", "Insalubridade"]
    assert result.to_dict()["benefits"] == ["VT", "Insalubridade"]
