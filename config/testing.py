import os

from .config import db_config

SECRET_KEY = "test-secret"

DB_CONFIG = db_config()

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

MAX_UPLOAD_MB = 4

# Tests run against the built-in thresholds only.
ANALYSIS_DEFAULTS = {}

AUTO_INIT_DB = False
