# backend/salesdash/config.py
from __future__ import annotations
import os


class Config:
    # Optional "SECRET_KEY", with default dev key
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL", #optional alternative location
        "sqlite:///salesdash.sqlite3", #default local location
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Filter value meaning "no branch/concept filter" on report endpoints
    REPORT_ALL_SENTINEL = "ALL"

    # Upload ceiling for category imports (10 MiB)
    MAX_CONTENT_LENGTH = int(os.environ.get("MAX_IMPORT_BYTES", 10 * 1024 * 1024))
