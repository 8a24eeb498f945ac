import os

from .config import analysis_defaults, db_config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config()

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "16"))

ANALYSIS_DEFAULTS = analysis_defaults()

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
