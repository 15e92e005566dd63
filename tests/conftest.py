"""
Test configuration applied before any app import.

Settings are read at import time, so the environment must be set here: tests run
against SQLite and a fixed signing key, never against a configured Postgres.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-signing-secret-for-the-roster-api-suite"
os.environ["JWT_ALGORITHM"] = "HS256"
os.environ["JWT_EXPIRE_MINUTES"] = "60"
os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("LOG_LEVEL", "WARNING")
