from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...preferences.model import Thresholds
from ...schedules.model import Schedule


@dataclass(frozen=True)
class ArrivalDecision:
    late_minutes: int = 0
    late_hours: float = 0.0
    # Provisional: only paid out when the day reaches a full workday.
    early_arrival_credit: float = 0.0


def late_credit(minutes_late: int, thresholds: Thresholds) -> float:
    """Tiered late-hours credit; a value equal to a threshold stays in the lower tier."""
    if minutes_late > thresholds.full_hour:
        return 1.0
    if minutes_late > thresholds.half_hour:
        return 0.5
    return 0.0


def late_decision(arrival: int, schedule: Schedule, thresholds: Thresholds) -> ArrivalDecision:
    minutes_late = arrival - schedule.start_time
    return ArrivalDecision(late_minutes=minutes_late, late_hours=late_credit(minutes_late, thresholds))


class ArrivalStrategy(ABC):
    """Strategy Pattern: how a schedule judges the first punch of a day."""

    @abstractmethod
    def decide_arrival(self, *, arrival: int, schedule: Schedule, late_thresholds: Thresholds) -> ArrivalDecision:
        raise NotImplementedError
