from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .analysis.evaluator import DailyEvaluator
from .analysis.factory import ArrivalStrategyFactory
from .analysis.service import PeriodAnalysisService
from .database.connection import DBConfig, DatabaseConnection
from .preferences.model import DEFAULT_CONFIG, AnalysisConfig
from .preferences.mysql_preferences_repository import MySQLPreferencesRepository
from .preferences.repository import PreferencesRepository
from .preferences.service import PreferencesService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    preferences_repo: PreferencesRepository

    preferences_service: PreferencesService
    analysis_service: PeriodAnalysisService


def build_services(preferences_repo: PreferencesRepository, *, defaults: AnalysisConfig = DEFAULT_CONFIG, conn=None) -> Container:
    analysis_service = PeriodAnalysisService(
        evaluator=DailyEvaluator(strategy_factory=ArrivalStrategyFactory()),
    )
    return Container(
        conn=conn,
        preferences_repo=preferences_repo,
        preferences_service=PreferencesService(preferences_repo, defaults=defaults),
        analysis_service=analysis_service,
    )


def build_container(*, db_config: dict, analysis_defaults: Optional[dict] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    defaults = AnalysisConfig.from_dict(analysis_defaults) if analysis_defaults else DEFAULT_CONFIG
    return build_services(MySQLPreferencesRepository(conn), defaults=defaults, conn=conn)
