from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List

from ..core.enums import DayStatus
from ..punches.model import PunchRecord
from ..schedules.model import Schedule


@dataclass(frozen=True)
class DayEvaluation:
    """Lateness and overtime figures for one employee-day."""

    late_minutes: int = 0
    overtime_hours: float = 0.0
    late_hours: float = 0.0

    def to_dict(self) -> dict:
        return {
            "late_minutes": self.late_minutes,
            "overtime_hours": self.overtime_hours,
            "late_hours": self.late_hours,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """One employee's aggregate over the selected period.

    `daily_records` keeps every filtered punch grouped by date (including
    dates outside the period) for drill-down display.
    """

    name: str
    schedule: Schedule
    days_registered: int
    absences: int
    late_days: int
    late_minutes: int
    late_hours: float
    overtime_hours: float
    saturday_hours: float
    total_hours: float
    daily_records: Dict[date, List[PunchRecord]] = field(default_factory=dict)

    def to_dict(self, *, include_records: bool = True) -> dict:
        data = {
            "name": self.name,
            "schedule": {"kind": self.schedule.kind.value, "label": self.schedule.label, **self.schedule.to_dict()},
            "days_registered": self.days_registered,
            "absences": self.absences,
            "late_days": self.late_days,
            "late_minutes": self.late_minutes,
            "late_hours": self.late_hours,
            "overtime_hours": self.overtime_hours,
            "saturday_hours": self.saturday_hours,
            "total_hours": self.total_hours,
        }
        if include_records:
            data["daily_records"] = {
                d.isoformat(): [p.to_dict() for p in punches] for d, punches in self.daily_records.items()
            }
        return data


@dataclass(frozen=True)
class Holiday:
    """A public holiday supplied by the caller's holiday source."""

    day: date
    kind: str
    name: str


@dataclass(frozen=True)
class DayDetail:
    """Read-model for the per-day drill-down of one employee."""

    day: date
    punches: List[PunchRecord]
    evaluation: DayEvaluation
    saturday_hours: float
    is_saturday: bool
    has_records: bool
    has_missing_records: bool
    is_holiday: bool
    status: DayStatus

    def to_dict(self) -> dict:
        return {
            "date": self.day.isoformat(),
            "punches": [p.to_dict() for p in self.punches],
            **self.evaluation.to_dict(),
            "saturday_hours": self.saturday_hours,
            "is_saturday": self.is_saturday,
            "has_records": self.has_records,
            "has_missing_records": self.has_missing_records,
            "is_holiday": self.is_holiday,
            "status": self.status.value,
        }
