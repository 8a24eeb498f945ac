from __future__ import annotations

from ...preferences.model import Thresholds
from ...schedules.model import Schedule
from .base import ArrivalDecision, ArrivalStrategy, late_decision


class EarlyScheduleStrategy(ArrivalStrategy):
    """Early schedule: lateness only, never early-arrival overtime."""

    def decide_arrival(self, *, arrival: int, schedule: Schedule, late_thresholds: Thresholds) -> ArrivalDecision:
        if arrival > schedule.start_time:
            return late_decision(arrival, schedule, late_thresholds)
        return ArrivalDecision()
