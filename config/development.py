import os

from .config import analysis_defaults, db_config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config()

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "16"))

ANALYSIS_DEFAULTS = analysis_defaults()

# If enabled, app creates its tables on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
