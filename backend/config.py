"""
Runtime configuration.

All settings come from environment variables (a local .env is loaded by
main.py before this module is imported). Defaults match a local dev setup:

  DATABASE_PATH=download_station.db   # ":memory:" keeps everything in RAM
  DEFAULT_ADMIN_PASSWORD=admin123
  SESSION_TTL_HOURS=24
"""

import os


def _flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


DATABASE_PATH = os.environ.get("DATABASE_PATH", "download_station.db")

# Single admin principal; the username is not configurable
ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = os.environ.get("DEFAULT_ADMIN_PASSWORD", "admin123")
MIN_PASSWORD_LENGTH = 6

SESSION_TTL_HOURS = float(os.environ.get("SESSION_TTL_HOURS", "24"))
SESSION_TTL_MS = int(SESSION_TTL_HOURS * 60 * 60 * 1000)

SESSION_HEADER = "X-Session-ID"
SESSION_COOKIE = "session"

AUTO_INIT_DB = _flag("AUTO_INIT_DB", True)
SEED_SAMPLE_FILES = _flag("SEED_SAMPLE_FILES", True)

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "CORS_ORIGINS", "http://localhost:5173,http://localhost:3000"
    ).split(",")
    if origin.strip()
]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
