"""
Environment configuration.

Values are read once at import time. The CLI and the API app both
read from here so a single set of variables drives every entry point.
"""

import os

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _log_level(value):
    """Normalise a level name; unknown names fall back to WARNING."""
    level = (value or "WARNING").strip().upper()
    return level if level in LOG_LEVELS else "WARNING"


def _int_or_none(value):
    if value is None or value == "":
        return None
    return int(value)


TICTACTOE_ENV = os.getenv("TICTACTOE_ENV", "development")
TICTACTOE_SEED = _int_or_none(os.getenv("TICTACTOE_SEED"))
TICTACTOE_LOG_LEVEL = _log_level(os.getenv("TICTACTOE_LOG_LEVEL"))
TICTACTOE_HOST = os.getenv("TICTACTOE_HOST", "127.0.0.1")
TICTACTOE_PORT = int(os.getenv("TICTACTOE_PORT", "8000"))
TICTACTOE_SESSION_IDLE_SECONDS = int(os.getenv("TICTACTOE_SESSION_IDLE_SECONDS", "3600"))
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"
