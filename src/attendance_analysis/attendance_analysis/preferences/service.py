from __future__ import annotations

import json
import logging
from typing import Any, List, Mapping, Optional

from ..core.constants import DEFAULT_PREFERENCES_PROFILE
from ..core.exceptions import ValidationError
from ..reports.exporter import DEFAULT_COLUMNS, ReportColumn, apply_visibility
from .model import DEFAULT_CONFIG, AnalysisConfig
from .repository import PreferencesRepository

logger = logging.getLogger(__name__)


def _columns_key(profile: str) -> str:
    return f"{profile}:columns"


class PreferencesService:
    """Use case: load and store analysis preferences and column visibility.

    Stored data that cannot be read back falls back to the defaults, so a
    broken record never blocks an analysis run.
    """

    def __init__(
        self,
        preferences: PreferencesRepository,
        *,
        defaults: AnalysisConfig = DEFAULT_CONFIG,
        profile: str = DEFAULT_PREFERENCES_PROFILE,
    ):
        self._preferences = preferences
        self._defaults = defaults
        self._profile = profile

    def _load_json(self, key: str) -> Optional[Any]:
        raw = self._preferences.load(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Ignoring unreadable stored preferences for %r", key)
            return None

    def get_config(self, profile: Optional[str] = None) -> AnalysisConfig:
        key = profile or self._profile
        data = self._load_json(key)
        if data is None:
            return self._defaults
        try:
            return AnalysisConfig.from_dict(data, base=self._defaults)
        except ValidationError as e:
            logger.warning("Stored preferences for %r are invalid (%s); using defaults", key, e)
            return self._defaults

    def update_config(self, data: Mapping[str, Any], profile: Optional[str] = None) -> AnalysisConfig:
        key = profile or self._profile
        config = AnalysisConfig.from_dict(data, base=self.get_config(key))
        self._preferences.save(key, json.dumps(config.to_dict()))
        logger.info("Saved preferences for %r", key)
        return config

    def reset(self, profile: Optional[str] = None) -> AnalysisConfig:
        key = profile or self._profile
        self._preferences.delete(key)
        return self._defaults

    def get_columns(self, profile: Optional[str] = None) -> List[ReportColumn]:
        data = self._load_json(_columns_key(profile or self._profile))
        if not isinstance(data, dict):
            return list(DEFAULT_COLUMNS)
        return apply_visibility(data)

    def update_columns(self, visibility: Mapping[str, Any], profile: Optional[str] = None) -> List[ReportColumn]:
        if not isinstance(visibility, Mapping):
            raise ValidationError("Column visibility must be a JSON object")
        known = {col.id for col in DEFAULT_COLUMNS}
        for column_id, visible in visibility.items():
            if column_id not in known:
                raise ValidationError(f"Unknown column {column_id!r}")
            if not isinstance(visible, bool):
                raise ValidationError(f"Visibility of {column_id!r} must be true or false")

        columns = apply_visibility(visibility, self.get_columns(profile))
        payload = {col.id: col.visible for col in columns}
        self._preferences.save(_columns_key(profile or self._profile), json.dumps(payload))
        return columns
