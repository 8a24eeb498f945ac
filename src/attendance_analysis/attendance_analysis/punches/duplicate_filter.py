from __future__ import annotations

import logging
from typing import Iterable, List

from ..common.datetime_utils import minutes_between
from .model import PunchRecord

logger = logging.getLogger(__name__)


def _is_duplicate(current: PunchRecord, last_kept: PunchRecord, threshold_minutes: int) -> bool:
    return (
        minutes_between(last_kept.timestamp, current.timestamp) <= threshold_minutes
        and current.kind == last_kept.kind
        and current.operation == last_kept.operation
    )


def filter_duplicates(punches: Iterable[PunchRecord], threshold_minutes: int) -> List[PunchRecord]:
    """Sort punches by time and drop near-duplicates.

    A punch survives when it is more than `threshold_minutes` after the
    last *kept* punch, or differs from it in kind or operation. Comparing
    against the last kept punch (not the last seen one) means a burst of
    identical punches collapses onto its first member.
    """
    ordered = sorted(punches, key=lambda p: p.timestamp)
    kept: List[PunchRecord] = []
    for punch in ordered:
        if kept and _is_duplicate(punch, kept[-1], threshold_minutes):
            continue
        kept.append(punch)

    dropped = len(ordered) - len(kept)
    if dropped:
        logger.debug("Dropped %d duplicate punch(es) within %d min", dropped, threshold_minutes)
    return kept
