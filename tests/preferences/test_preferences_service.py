from __future__ import annotations

import json
from typing import Optional

import pytest

from src.attendance_analysis.attendance_analysis.core.exceptions import ValidationError
from src.attendance_analysis.attendance_analysis.preferences.model import DEFAULT_CONFIG, AnalysisConfig
from src.attendance_analysis.attendance_analysis.preferences.service import PreferencesService


class InMemoryPreferences:
    def __init__(self):
        self.rows: dict[str, str] = {}

    def load(self, profile: str) -> Optional[str]:
        return self.rows.get(profile)

    def save(self, profile: str, payload: str) -> None:
        self.rows[profile] = payload

    def delete(self, profile: str) -> bool:
        return self.rows.pop(profile, None) is not None


def test_defaults_when_nothing_is_stored():
    service = PreferencesService(InMemoryPreferences())
    assert service.get_config() == DEFAULT_CONFIG
    assert DEFAULT_CONFIG.to_dict()["lateThresholds"] == {"halfHour": 5, "fullHour": 35}


def test_partial_update_merges_over_current_values():
    repo = InMemoryPreferences()
    service = PreferencesService(repo)

    service.update_config({"lunchDuration": 45})
    config = service.update_config({"earlySchedule": {"startTime": 390}})

    assert config.lunch_duration == 45
    assert config.early_schedule.start_time == 390
    assert config.early_schedule.end_time == 960
    assert service.get_config() == config
    assert json.loads(repo.rows["default"])["earlySchedule"]["startTime"] == 390


@pytest.mark.parametrize(
    "payload",
    [
        {"lateThresholds": {"halfHour": 40}},
        {"duplicateThresholdMinutes": 0},
        {"duplicateThresholdMinutes": True},
        {"regularSchedule": {"endTime": 400}},
        {"regularSchedule": {"startTime": 1500}},
        {"overtimeThresholds": [25, 55]},
        {"showAllDays": "yes"},
    ],
)
def test_invalid_updates_are_rejected_and_not_saved(payload):
    repo = InMemoryPreferences()
    service = PreferencesService(repo)

    with pytest.raises(ValidationError):
        service.update_config(payload)
    assert repo.rows == {}


def test_broken_stored_record_falls_back_to_defaults():
    repo = InMemoryPreferences()
    repo.rows["default"] = "{not json"
    assert PreferencesService(repo).get_config() == DEFAULT_CONFIG

    repo.rows["default"] = json.dumps({"lunchDuration": -5})
    assert PreferencesService(repo).get_config() == DEFAULT_CONFIG


def test_reset_and_custom_defaults():
    repo = InMemoryPreferences()
    defaults = AnalysisConfig.from_dict({"duplicateThresholdMinutes": 3})
    service = PreferencesService(repo, defaults=defaults)

    service.update_config({"lunchDuration": 30})
    assert service.reset() == defaults
    assert service.get_config().duplicate_threshold_minutes == 3
    assert "default" not in repo.rows


def test_profiles_are_independent():
    service = PreferencesService(InMemoryPreferences())
    service.update_config({"lunchDuration": 30}, profile="night")

    assert service.get_config("night").lunch_duration == 30
    assert service.get_config().lunch_duration == 60


def test_column_visibility_is_stored_separately():
    repo = InMemoryPreferences()
    service = PreferencesService(repo)

    columns = service.update_columns({"late_minutes": True, "name": False})
    by_id = {c.id: c.visible for c in columns}

    assert by_id["late_minutes"] is True
    assert by_id["name"] is False
    assert json.loads(repo.rows["default:columns"])["late_minutes"] is True
    assert service.get_config() == DEFAULT_CONFIG
    assert {c.id: c.visible for c in service.get_columns()} == by_id


def test_column_updates_validate_ids_and_flags():
    service = PreferencesService(InMemoryPreferences())
    with pytest.raises(ValidationError):
        service.update_columns({"salary": True})
    with pytest.raises(ValidationError):
        service.update_columns({"name": "no"})
