from __future__ import annotations

from src.attendance_analysis.attendance_analysis.analysis.evaluator import evaluate_day
from src.attendance_analysis.attendance_analysis.core.enums import PunchKind, ScheduleKind
from src.attendance_analysis.attendance_analysis.preferences.model import DEFAULT_CONFIG
from src.attendance_analysis.attendance_analysis.punches.model import PunchRecord
from src.attendance_analysis.attendance_analysis.schedules.classifier import classify_schedule
from src.attendance_analysis.attendance_analysis.schedules.model import Schedule

# Mon 2025-03-03 .. Fri 2025-03-07, Sat 2025-03-08
WEEKDAYS = ["2025-03-03", "2025-03-04", "2025-03-05", "2025-03-06", "2025-03-07"]


def _days(name: str, entry: str, exit_: str, days=WEEKDAYS):
    punches = []
    for d in days:
        punches.append(PunchRecord(employee_name=name, recorded_at=f"{d} {entry}", kind=PunchKind.IN))
        punches.append(PunchRecord(employee_name=name, recorded_at=f"{d} {exit_}", kind=PunchKind.OUT))
    return punches


def test_early_when_both_entry_and_exit_are_closer_to_early():
    schedule = classify_schedule(_days("Ana", "07:02:00", "16:05:00"), DEFAULT_CONFIG)
    assert schedule is DEFAULT_CONFIG.early_schedule
    assert schedule.kind == ScheduleKind.EARLY


def test_regular_when_only_entry_looks_early():
    schedule = classify_schedule(_days("Ana", "07:00:00", "17:00:00"), DEFAULT_CONFIG)
    assert schedule.kind == ScheduleKind.REGULAR


def test_regular_without_exit_samples():
    punches = [p for p in _days("Ana", "07:00:00", "16:00:00") if p.kind == PunchKind.IN]
    assert classify_schedule(punches, DEFAULT_CONFIG) is DEFAULT_CONFIG.regular_schedule
    assert classify_schedule([], DEFAULT_CONFIG) is DEFAULT_CONFIG.regular_schedule


def test_weekend_punches_are_ignored():
    punches = _days("Ana", "08:00:00", "17:00:00", days=WEEKDAYS[:1])
    punches += _days("Ana", "07:00:00", "16:00:00", days=["2025-03-08", "2025-03-09"] * 3)
    assert classify_schedule(punches, DEFAULT_CONFIG).kind == ScheduleKind.REGULAR


def test_identical_distributions_classify_identically():
    ana = classify_schedule(_days("Ana", "07:10:00", "16:10:00"), DEFAULT_CONFIG)
    beto = classify_schedule(_days("Beto", "07:10:00", "16:10:00"), DEFAULT_CONFIG)
    assert ana == beto


def test_kind_tag_drives_rules_even_with_identical_times():
    same_times = Schedule(ScheduleKind.EARLY, 8 * 60, 17 * 60, 12 * 60, 13 * 60)
    config = DEFAULT_CONFIG.with_overrides(early_schedule=same_times)
    day = [
        PunchRecord(employee_name="Ana", recorded_at="2025-03-03 06:58:00", kind=PunchKind.IN),
        PunchRecord(employee_name="Ana", recorded_at="2025-03-03 17:00:00", kind=PunchKind.OUT),
    ]

    assert evaluate_day(day, config.regular_schedule, config).overtime_hours == 1.0
    assert evaluate_day(day, config.early_schedule, config).overtime_hours == 0.0
