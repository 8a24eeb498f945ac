from __future__ import annotations

import logging
from statistics import fmean
from typing import Iterable, List

from ..common.datetime_utils import is_weekend, minutes_since_midnight
from ..core.enums import PunchKind
from ..preferences.model import AnalysisConfig
from ..punches.model import PunchRecord
from .model import Schedule

logger = logging.getLogger(__name__)


def _weekday_minutes(punches: Iterable[PunchRecord], kind: PunchKind) -> List[int]:
    minutes = []
    for p in punches:
        moment = p.timestamp
        if p.kind == kind and not is_weekend(moment):
            minutes.append(minutes_since_midnight(moment))
    return minutes


def classify_schedule(punches: Iterable[PunchRecord], config: AnalysisConfig) -> Schedule:
    """Pick the early or the regular schedule for one employee.

    Early wins only when the mean weekday entry time is closer to the
    early start AND the mean weekday exit time is closer to the early end.
    The result is one of the two configured Schedule values, applied to
    every day of the period.
    """
    punches = list(punches)
    entries = _weekday_minutes(punches, PunchKind.IN)
    exits = _weekday_minutes(punches, PunchKind.OUT)

    regular = config.regular_schedule
    early = config.early_schedule

    # Without both an entry and an exit sample the means are undefined;
    # such employees stay on the regular schedule.
    if not entries or not exits:
        return regular

    avg_entry = fmean(entries)
    avg_exit = fmean(exits)

    entry_closer_to_early = abs(avg_entry - early.start_time) < abs(avg_entry - regular.start_time)
    exit_closer_to_early = abs(avg_exit - early.end_time) < abs(avg_exit - regular.end_time)

    chosen = early if entry_closer_to_early and exit_closer_to_early else regular
    logger.debug("Mean entry %.1f, mean exit %.1f -> %s schedule", avg_entry, avg_exit, chosen.kind.value)
    return chosen
