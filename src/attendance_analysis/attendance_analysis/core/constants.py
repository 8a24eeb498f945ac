"""Punch formats, evaluation rule constants and preference defaults."""

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"

MINUTES_PER_DAY = 24 * 60

# A day must reach this many worked minutes before any overtime is credited.
FULL_WORKDAY_MINUTES = 8 * 60

# Regular-schedule arrivals at or before these minute-of-day marks earn
# early-arrival overtime (1.0 and 0.5 respectively).
EARLY_ARRIVAL_FULL_CREDIT_UNTIL = 7 * 60 + 5
EARLY_ARRIVAL_HALF_CREDIT_UNTIL = 7 * 60 + 30

# Drill-down flags a weekday as incomplete when entry/exit deviate this much.
MISSING_RECORD_TOLERANCE_MINUTES = 60

DEFAULT_DUPLICATE_THRESHOLD_MINUTES = 5
DEFAULT_LUNCH_DURATION_MINUTES = 60
DEFAULT_OVERTIME_HALF_HOUR = 25
DEFAULT_OVERTIME_FULL_HOUR = 55
DEFAULT_LATE_HALF_HOUR = 5
DEFAULT_LATE_FULL_HOUR = 35

DEFAULT_PREFERENCES_PROFILE = "default"
