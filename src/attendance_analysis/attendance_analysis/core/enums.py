from __future__ import annotations

from enum import Enum


class PunchKind(str, Enum):
    """Kind of clock event as exported by the time clock ("Tipo de registro")."""

    IN = "In"
    OUT = "Out"
    BREAK = "Break"


class PunchOperation(str, Enum):
    """Qualifies Break punches: Out starts the break, In ends it."""

    IN = "In"
    OUT = "Out"


class ScheduleKind(str, Enum):
    """The two named schedules an employee can be classified into."""

    REGULAR = "regular"
    EARLY = "early"


class DayStatus(str, Enum):
    """Status of a single calendar day in the drill-down view."""

    SATURDAY_WORKED = "SATURDAY_WORKED"
    SATURDAY_EMPTY = "SATURDAY_EMPTY"
    HOLIDAY = "HOLIDAY"
    NO_RECORDS = "NO_RECORDS"
    INCOMPLETE = "INCOMPLETE"
    COMPLETE = "COMPLETE"
