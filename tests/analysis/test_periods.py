from datetime import date

import pytest

from src.attendance_analysis.attendance_analysis.analysis.periods import (
    Period,
    default_period,
    fortnight_of,
    fortnight_range,
    next_fortnight,
    previous_fortnight,
)
from src.attendance_analysis.attendance_analysis.core.enums import PunchKind
from src.attendance_analysis.attendance_analysis.core.exceptions import ValidationError
from src.attendance_analysis.attendance_analysis.punches.model import PunchRecord


def test_fortnight_ranges():
    assert fortnight_range(date(2025, 2, 10), 1) == Period(date(2025, 2, 1), date(2025, 2, 15), 1)
    assert fortnight_range(date(2025, 2, 10), 2) == Period(date(2025, 2, 16), date(2025, 2, 28), 2)
    assert fortnight_range(date(2024, 2, 1), 2).end == date(2024, 2, 29)

    with pytest.raises(ValidationError):
        fortnight_range(date(2025, 2, 1), 3)


def test_fortnight_of_day():
    assert fortnight_of(date(2025, 3, 15)).fortnight == 1
    assert fortnight_of(date(2025, 3, 16)).fortnight == 2


def test_navigation_wraps_across_years():
    december = fortnight_range(date(2024, 12, 1), 2)
    january = next_fortnight(december)

    assert january == Period(date(2025, 1, 1), date(2025, 1, 15), 1)
    assert previous_fortnight(january) == december
    assert next_fortnight(january).start == date(2025, 1, 16)


def test_default_period_opens_on_the_earliest_punch():
    punches = [
        PunchRecord(employee_name="Ana", recorded_at="2025-03-20 08:00:00", kind=PunchKind.IN),
        PunchRecord(employee_name="Ana", recorded_at="2025-03-03 08:00:00", kind=PunchKind.IN),
    ]
    period = default_period(punches)

    assert period.start == date(2025, 3, 1)
    assert period.to_dict() == {"start": "2025-03-01", "end": "2025-03-15", "month": "2025-03", "fortnight": 1}

    with pytest.raises(ValidationError):
        default_period([])
