from __future__ import annotations

import pytest

from src.attendance_analysis.attendance_analysis.analysis.evaluator import evaluate_day
from src.attendance_analysis.attendance_analysis.analysis.factory import ArrivalStrategyFactory
from src.attendance_analysis.attendance_analysis.analysis.model import DayEvaluation
from src.attendance_analysis.attendance_analysis.analysis.strategies.early_strategy import EarlyScheduleStrategy
from src.attendance_analysis.attendance_analysis.analysis.strategies.regular_strategy import RegularScheduleStrategy
from src.attendance_analysis.attendance_analysis.core.enums import PunchKind, PunchOperation
from src.attendance_analysis.attendance_analysis.preferences.model import DEFAULT_CONFIG
from src.attendance_analysis.attendance_analysis.punches.model import PunchRecord

MONDAY = "2025-03-03"
SATURDAY = "2025-03-08"
REGULAR = DEFAULT_CONFIG.regular_schedule
EARLY = DEFAULT_CONFIG.early_schedule


def _p(time_s: str, kind: PunchKind = PunchKind.IN, op: PunchOperation | None = None, day: str = MONDAY) -> PunchRecord:
    return PunchRecord(employee_name="Ana", recorded_at=f"{day} {time_s}", kind=kind, operation=op)


def _day(entry: str, exit_: str | None = "17:00:00", day: str = MONDAY):
    punches = [_p(entry, day=day)]
    if exit_:
        punches.append(_p(exit_, PunchKind.OUT, day=day))
    return punches


def test_factory_picks_strategy_by_schedule_kind():
    factory = ArrivalStrategyFactory()
    assert isinstance(factory.for_schedule(REGULAR), RegularScheduleStrategy)
    assert isinstance(factory.for_schedule(EARLY), EarlyScheduleStrategy)


def test_late_arrival_on_regular_schedule():
    assert evaluate_day(_day("08:10:00"), REGULAR, DEFAULT_CONFIG) == DayEvaluation(
        late_minutes=10, overtime_hours=0.0, late_hours=0.5
    )


@pytest.mark.parametrize(
    "arrival, late_minutes, late_hours",
    [
        ("08:05:00", 5, 0.0),
        ("08:06:00", 6, 0.5),
        ("08:35:00", 35, 0.5),
        ("08:36:00", 36, 1.0),
    ],
)
def test_late_threshold_boundaries(arrival, late_minutes, late_hours):
    result = evaluate_day(_day(arrival), REGULAR, DEFAULT_CONFIG)
    assert result.late_minutes == late_minutes
    assert result.late_hours == late_hours


@pytest.mark.parametrize(
    "arrival, credit",
    [
        ("06:58:00", 1.0),
        ("07:05:00", 1.0),
        ("07:20:00", 0.5),
        ("07:30:00", 0.5),
        ("07:45:00", 0.0),
        ("08:00:00", 0.0),
    ],
)
def test_early_arrival_credit_on_regular_schedule(arrival, credit):
    result = evaluate_day(_day(arrival), REGULAR, DEFAULT_CONFIG)
    assert result.overtime_hours == credit
    assert result.late_minutes == 0


def test_early_arrival_credit_needs_a_full_workday():
    result = evaluate_day(_day("06:58:00", "14:00:00"), REGULAR, DEFAULT_CONFIG)
    assert result.overtime_hours == 0.0


@pytest.mark.parametrize(
    "departure, credit",
    [
        ("17:24:00", 0.0),
        ("17:25:00", 0.5),
        ("17:54:00", 0.5),
        ("17:55:00", 1.0),
        ("19:30:00", 1.0),
    ],
)
def test_evening_overtime_tiers(departure, credit):
    result = evaluate_day(_day("08:00:00", departure), REGULAR, DEFAULT_CONFIG)
    assert result.overtime_hours == credit


def test_early_and_evening_credits_add_up():
    result = evaluate_day(_day("07:00:00", "18:00:00"), REGULAR, DEFAULT_CONFIG)
    assert result.overtime_hours == 2.0


def test_early_schedule_never_earns_early_arrival_credit():
    result = evaluate_day(_day("06:00:00", "16:00:00"), EARLY, DEFAULT_CONFIG)
    assert result == DayEvaluation()

    late = evaluate_day(_day("07:10:00", "16:30:00"), EARLY, DEFAULT_CONFIG)
    assert late.late_minutes == 10
    assert late.late_hours == 0.5
    assert late.overtime_hours == 0.5


def test_long_lunch_counts_as_lateness_and_reduces_worked_time():
    punches = [
        _p("08:00:00"),
        _p("12:00:00", PunchKind.BREAK, PunchOperation.OUT),
        _p("13:15:00", PunchKind.BREAK, PunchOperation.IN),
        _p("17:00:00", PunchKind.OUT),
    ]
    result = evaluate_day(punches, REGULAR, DEFAULT_CONFIG)
    assert result.late_minutes == 15
    assert result.late_hours == 0.5

    # Worked 540 - 75 = 465 minutes: below a full workday.
    assert result.overtime_hours == 0.0

    later_exit = punches[:-1] + [_p("18:00:00", PunchKind.OUT)]
    assert evaluate_day(later_exit, REGULAR, DEFAULT_CONFIG).overtime_hours == 1.0


def test_short_day_after_long_lunch_earns_no_overtime():
    punches = [
        _p("08:00:00"),
        _p("12:00:00", PunchKind.BREAK, PunchOperation.OUT),
        _p("14:00:00", PunchKind.BREAK, PunchOperation.IN),
        _p("17:55:00", PunchKind.OUT),
    ]
    assert evaluate_day(punches, REGULAR, DEFAULT_CONFIG) == DayEvaluation(
        late_minutes=60, overtime_hours=0.0, late_hours=1.0
    )


def test_lunch_of_exactly_the_configured_length_is_free():
    punches = [
        _p("08:00:00"),
        _p("12:00:00", PunchKind.BREAK, PunchOperation.OUT),
        _p("13:00:00", PunchKind.BREAK, PunchOperation.IN),
        _p("17:00:00", PunchKind.OUT),
    ]
    assert evaluate_day(punches, REGULAR, DEFAULT_CONFIG) == DayEvaluation()


def test_unmatched_break_is_ignored():
    punches = [_p("08:00:00"), _p("12:00:00", PunchKind.BREAK, PunchOperation.OUT), _p("17:30:00", PunchKind.OUT)]
    result = evaluate_day(punches, REGULAR, DEFAULT_CONFIG)
    assert result.late_minutes == 0
    assert result.overtime_hours == 0.5


def test_saturday_short_circuits_everything():
    punches = [
        _p("09:00:00", day=SATURDAY),
        _p("10:00:00", PunchKind.BREAK, PunchOperation.OUT, day=SATURDAY),
        _p("12:00:00", PunchKind.BREAK, PunchOperation.IN, day=SATURDAY),
        _p("19:00:00", PunchKind.OUT, day=SATURDAY),
    ]
    assert evaluate_day(punches, REGULAR, DEFAULT_CONFIG) == DayEvaluation()


def test_single_punch_and_empty_days():
    single = evaluate_day(_day("08:20:00", None), REGULAR, DEFAULT_CONFIG)
    assert single == DayEvaluation(late_minutes=20, overtime_hours=0.0, late_hours=0.5)
    assert evaluate_day([], REGULAR, DEFAULT_CONFIG) == DayEvaluation()


def test_unsorted_duplicates_are_filtered_before_evaluation():
    punches = [_p("17:00:00", PunchKind.OUT), _p("08:12:00"), _p("08:10:00")]
    assert evaluate_day(punches, REGULAR, DEFAULT_CONFIG).late_minutes == 10
