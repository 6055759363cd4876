from datetime import date, datetime

from ponto_system.attendance.model import ClockPunch
from ponto_system.core.enums import JustificationStatus, Observation, PunchKind
from ponto_system.employees.model import Employee
from ponto_system.justifications.model import Justification
from ponto_system.schedules.model import WorkSchedule
from ponto_system.schedules.resolver import ScheduleResolver
from ponto_system.timebank.calculator import TimeBankCalculator

CUSTOM = WorkSchedule("08:00", "12:00", "13:00", "17:00")


def _p(kind, ts):
    return ClockPunch(user_id="1", kind=kind, timestamp=datetime.fromisoformat(ts))


def _full_day(day):
    return [
        _p(PunchKind.ENTRY, f"{day}T08:00:00"),
        _p(PunchKind.LUNCH_OUT, f"{day}T12:00:00"),
        _p(PunchKind.LUNCH_IN, f"{day}T13:00:00"),
        _p(PunchKind.EXIT, f"{day}T17:00:00"),
    ]


def _calculator():
    return TimeBankCalculator(ScheduleResolver(WorkSchedule("09:00", "", "", "12:00")))


def _employee(**kwargs):
    kwargs.setdefault("custom_work_hours", CUSTOM)
    return Employee(employee_id="1", name="Ana Souza", **kwargs)


def _by_date(report):
    return {d.date: d for d in report.daily_balances}


def test_full_day_matches_schedule():
    report = _calculator().generate_report(_employee(), "2024-09", _full_day("2024-09-02"), [])
    day = _by_date(report)[date(2024, 9, 2)]

    assert day.worked_minutes == 480
    assert day.expected_minutes == 480
    assert day.balance == 0
    assert day.observation == Observation.NONE
    assert day.day_of_week == "seg."


def test_weekend_overtime():
    punches = [_p(PunchKind.ENTRY, "2024-09-07T08:00:00"), _p(PunchKind.EXIT, "2024-09-07T12:00:00")]

    day = _by_date(_calculator().generate_report(_employee(), "2024-09", punches, []))[date(2024, 9, 7)]

    assert day.expected_minutes == 0
    assert day.worked_minutes == 240
    assert day.balance == 240
    assert day.observation == Observation.WEEKEND_OVERTIME


def test_justified_day_without_punches_is_never_absence():
    justification = Justification(
        user_id="1", status=JustificationStatus.APPROVED, start_date=date(2024, 9, 3), end_date=date(2024, 9, 3)
    )

    day = _by_date(_calculator().generate_report(_employee(), "2024-09", [], [justification]))[date(2024, 9, 3)]

    assert day.balance == 0
    assert day.observation == Observation.JUSTIFIED


def test_justified_day_keeps_worked_minutes():
    justification = Justification(user_id="1", status=JustificationStatus.APPROVED, start_date=date(2024, 9, 2))

    report = _calculator().generate_report(_employee(), "2024-09", _full_day("2024-09-02"), [justification])
    day = _by_date(report)[date(2024, 9, 2)]

    assert day.worked_minutes == 480
    assert day.balance == 0
    assert day.observation == Observation.JUSTIFIED


def test_weekend_overtime_beats_justification():
    justification = Justification(user_id="1", status=JustificationStatus.APPROVED, start_date=date(2024, 9, 7))
    punches = [_p(PunchKind.ENTRY, "2024-09-07T08:00:00"), _p(PunchKind.EXIT, "2024-09-07T10:00:00")]

    day = _by_date(_calculator().generate_report(_employee(), "2024-09", punches, [justification]))[date(2024, 9, 7)]

    assert day.observation == Observation.WEEKEND_OVERTIME
    assert day.balance == 120


def test_absence_on_empty_weekday():
    day = _by_date(_calculator().generate_report(_employee(), "2024-09", [], []))[date(2024, 9, 4)]

    assert day.observation == Observation.ABSENCE
    assert day.balance == -480


def test_partial_day_regular_balance():
    punches = [_p(PunchKind.ENTRY, "2024-09-02T08:00:00"), _p(PunchKind.EXIT, "2024-09-02T16:00:00")]

    day = _by_date(_calculator().generate_report(_employee(), "2024-09", punches, []))[date(2024, 9, 2)]

    # no lunch punches: 8h straight against a 8h schedule
    assert day.balance == 0
    assert day.observation == Observation.NONE


def test_idle_weekends_are_omitted_and_totals_add_up():
    justification = Justification(user_id="1", status=JustificationStatus.APPROVED, start_date=date(2024, 9, 3))
    punches = _full_day("2024-09-02") + [
        _p(PunchKind.ENTRY, "2024-09-07T08:00:00"),
        _p(PunchKind.EXIT, "2024-09-07T12:00:00"),
    ]

    report = _calculator().generate_report(_employee(), "2024-09", punches, [justification])

    # 21 weekdays + the worked Saturday
    assert len(report.daily_balances) == 22
    assert report.total_expected == 21 * 480
    assert report.total_worked == 480 + 240
    assert report.total_balance == 240 - 19 * 480
    assert report.period == "Setembro/2024"
    assert report.employee_name == "Ana Souza"


def test_empty_override_means_no_expected_minutes():
    report = _calculator().generate_report(_employee(custom_work_hours=WorkSchedule()), "2024-09", [], [])

    assert report.total_expected == 0
    assert all(d.observation == Observation.NONE for d in report.daily_balances)
    assert report.total_balance == 0


def test_company_default_used_without_override():
    report = _calculator().generate_report(_employee(custom_work_hours=None), "2024-09", [], [])

    assert report.daily_balances[0].expected_minutes == 180
