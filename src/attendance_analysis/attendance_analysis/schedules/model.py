from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..common.datetime_utils import format_minutes
from ..common.validators import require_minute_of_day
from ..core.enums import ScheduleKind
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Schedule:
    """Domain entity: a named work schedule.

    All times are minutes from midnight. The kind tag is what the rest of
    the engine branches on; two schedules with equal times are still
    told apart by it.
    """

    kind: ScheduleKind
    start_time: int
    end_time: int
    lunch_start: int
    lunch_end: int

    @property
    def label(self) -> str:
        return f"{self.kind.value.capitalize()} ({format_minutes(self.start_time)} - {format_minutes(self.end_time)})"

    def validate(self) -> "Schedule":
        prefix = f"{self.kind.value} schedule"
        require_minute_of_day(self.start_time, f"{prefix} start time")
        require_minute_of_day(self.end_time, f"{prefix} end time")
        require_minute_of_day(self.lunch_start, f"{prefix} lunch start")
        require_minute_of_day(self.lunch_end, f"{prefix} lunch end")
        if self.end_time <= self.start_time:
            raise ValidationError(f"{prefix} must end after it starts")
        return self

    def to_dict(self) -> dict:
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "lunchStart": self.lunch_start,
            "lunchEnd": self.lunch_end,
        }

    @classmethod
    def from_dict(cls, kind: ScheduleKind, data: Mapping[str, Any], *, base: "Schedule | None" = None) -> "Schedule":
        """Build from the camelCase preferences shape; missing keys fall back to `base`."""

        def pick(key: str, fallback: Any) -> Any:
            return data[key] if key in data else fallback

        return cls(
            kind=kind,
            start_time=pick("startTime", base.start_time if base else None),
            end_time=pick("endTime", base.end_time if base else None),
            lunch_start=pick("lunchStart", base.lunch_start if base else None),
            lunch_end=pick("lunchEnd", base.lunch_end if base else None),
        )
