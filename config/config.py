"""Settings shared by every environment module."""

import os


def _env_int(name: str):
    value = os.getenv(name)
    return int(value) if value not in (None, "") else None


def db_config(default_password: str = "") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "attendance_analysis"),
    }


def analysis_defaults() -> dict:
    """Threshold overrides from the environment, in the stored-preferences shape.

    Unset variables are left out so the built-in defaults apply.
    """
    overrides = {
        "duplicateThresholdMinutes": _env_int("DUPLICATE_THRESHOLD_MINUTES"),
        "lunchDuration": _env_int("LUNCH_DURATION_MINUTES"),
        "overtimeThresholds": {
            "halfHour": _env_int("OVERTIME_HALF_HOUR_MINUTES"),
            "fullHour": _env_int("OVERTIME_FULL_HOUR_MINUTES"),
        },
        "lateThresholds": {
            "halfHour": _env_int("LATE_HALF_HOUR_MINUTES"),
            "fullHour": _env_int("LATE_FULL_HOUR_MINUTES"),
        },
    }
    for key in ("overtimeThresholds", "lateThresholds"):
        overrides[key] = {k: v for k, v in overrides[key].items() if v is not None}
    return {k: v for k, v in overrides.items() if v not in (None, {})}
