from __future__ import annotations

from ...core.constants import EARLY_ARRIVAL_FULL_CREDIT_UNTIL, EARLY_ARRIVAL_HALF_CREDIT_UNTIL
from ...preferences.model import Thresholds
from ...schedules.model import Schedule
from .base import ArrivalDecision, ArrivalStrategy, late_decision


class RegularScheduleStrategy(ArrivalStrategy):
    """Regular schedule: late after start, early-arrival overtime before it."""

    def decide_arrival(self, *, arrival: int, schedule: Schedule, late_thresholds: Thresholds) -> ArrivalDecision:
        if arrival < schedule.start_time:
            if arrival <= EARLY_ARRIVAL_FULL_CREDIT_UNTIL:
                return ArrivalDecision(early_arrival_credit=1.0)
            if arrival <= EARLY_ARRIVAL_HALF_CREDIT_UNTIL:
                return ArrivalDecision(early_arrival_credit=0.5)
            return ArrivalDecision()
        if arrival > schedule.start_time:
            return late_decision(arrival, schedule, late_thresholds)
        return ArrivalDecision()
