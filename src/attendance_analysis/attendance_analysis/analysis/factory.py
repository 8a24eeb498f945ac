from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ScheduleKind
from ..schedules.model import Schedule
from .strategies.base import ArrivalStrategy
from .strategies.early_strategy import EarlyScheduleStrategy
from .strategies.regular_strategy import RegularScheduleStrategy


@dataclass
class ArrivalStrategyFactory:
    """Factory Pattern: choose the arrival rules by schedule kind."""

    def for_schedule(self, schedule: Schedule) -> ArrivalStrategy:
        if schedule.kind == ScheduleKind.EARLY:
            return EarlyScheduleStrategy()
        return RegularScheduleStrategy()
