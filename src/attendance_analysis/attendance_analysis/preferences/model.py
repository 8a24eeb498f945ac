from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from ..common.validators import require_positive_int
from ..core import constants as c
from ..core.enums import ScheduleKind
from ..core.exceptions import ValidationError
from ..schedules.model import Schedule


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, Mapping):
        raise ValidationError(f"{key} must be a JSON object")
    return value


@dataclass(frozen=True)
class Thresholds:
    """Minute thresholds for the half-hour and full-hour credit tiers."""

    half_hour: int
    full_hour: int

    def validate(self, name: str) -> "Thresholds":
        require_positive_int(self.half_hour, f"{name} half hour")
        require_positive_int(self.full_hour, f"{name} full hour")
        if self.half_hour >= self.full_hour:
            raise ValidationError(f"{name} half hour must be below full hour")
        return self

    def to_dict(self) -> dict:
        return {"halfHour": self.half_hour, "fullHour": self.full_hour}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, base: "Thresholds") -> "Thresholds":
        return cls(
            half_hour=data.get("halfHour", base.half_hour),
            full_hour=data.get("fullHour", base.full_hour),
        )


@dataclass(frozen=True)
class AnalysisConfig:
    """Immutable analysis configuration passed into every engine call."""

    duplicate_threshold_minutes: int = c.DEFAULT_DUPLICATE_THRESHOLD_MINUTES
    lunch_duration: int = c.DEFAULT_LUNCH_DURATION_MINUTES
    regular_schedule: Schedule = field(
        default_factory=lambda: Schedule(ScheduleKind.REGULAR, 8 * 60, 17 * 60, 12 * 60, 13 * 60)
    )
    early_schedule: Schedule = field(
        default_factory=lambda: Schedule(ScheduleKind.EARLY, 7 * 60, 16 * 60, 12 * 60, 13 * 60)
    )
    overtime_thresholds: Thresholds = field(
        default_factory=lambda: Thresholds(c.DEFAULT_OVERTIME_HALF_HOUR, c.DEFAULT_OVERTIME_FULL_HOUR)
    )
    late_thresholds: Thresholds = field(
        default_factory=lambda: Thresholds(c.DEFAULT_LATE_HALF_HOUR, c.DEFAULT_LATE_FULL_HOUR)
    )
    show_all_days: bool = True

    def schedule_for(self, kind: ScheduleKind) -> Schedule:
        return self.early_schedule if kind == ScheduleKind.EARLY else self.regular_schedule

    def validate(self) -> "AnalysisConfig":
        require_positive_int(self.duplicate_threshold_minutes, "Duplicate threshold")
        require_positive_int(self.lunch_duration, "Lunch duration")
        if self.regular_schedule.kind != ScheduleKind.REGULAR or self.early_schedule.kind != ScheduleKind.EARLY:
            raise ValidationError("Schedules must be tagged regular and early respectively")
        self.regular_schedule.validate()
        self.early_schedule.validate()
        self.overtime_thresholds.validate("Overtime threshold")
        self.late_thresholds.validate("Late threshold")
        if not isinstance(self.show_all_days, bool):
            raise ValidationError("showAllDays must be a boolean")
        return self

    def with_overrides(self, **changes: Any) -> "AnalysisConfig":
        return replace(self, **changes).validate()

    def to_dict(self) -> dict:
        """camelCase shape shared with the stored preferences and the API."""
        return {
            "regularSchedule": self.regular_schedule.to_dict(),
            "earlySchedule": self.early_schedule.to_dict(),
            "duplicateThresholdMinutes": self.duplicate_threshold_minutes,
            "lunchDuration": self.lunch_duration,
            "overtimeThresholds": self.overtime_thresholds.to_dict(),
            "lateThresholds": self.late_thresholds.to_dict(),
            "showAllDays": self.show_all_days,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, base: "AnalysisConfig | None" = None) -> "AnalysisConfig":
        """Merge a (possibly partial) camelCase mapping over `base` and validate."""
        if not isinstance(data, Mapping):
            raise ValidationError("Preferences must be a JSON object")
        base = base or DEFAULT_CONFIG
        config = cls(
            duplicate_threshold_minutes=data.get("duplicateThresholdMinutes", base.duplicate_threshold_minutes),
            lunch_duration=data.get("lunchDuration", base.lunch_duration),
            regular_schedule=Schedule.from_dict(
                ScheduleKind.REGULAR, _section(data, "regularSchedule"), base=base.regular_schedule
            ),
            early_schedule=Schedule.from_dict(
                ScheduleKind.EARLY, _section(data, "earlySchedule"), base=base.early_schedule
            ),
            overtime_thresholds=Thresholds.from_dict(
                _section(data, "overtimeThresholds"), base=base.overtime_thresholds
            ),
            late_thresholds=Thresholds.from_dict(_section(data, "lateThresholds"), base=base.late_thresholds),
            show_all_days=data.get("showAllDays", base.show_all_days),
        )
        return config.validate()


DEFAULT_CONFIG = AnalysisConfig()
