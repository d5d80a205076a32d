"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from utils.errors import ConfigError

load_dotenv()


# ── HTTP server ───────────────────────────────────────────
HOST: str = os.getenv("HOST", "127.0.0.1")
PORT: int = int(os.getenv("PORT", "8080"))

# ── Static assets ─────────────────────────────────────────
STATIC_DIR: str = os.getenv("STATIC_DIR", str(Path(__file__).parent / "static"))

# ── PostgreSQL ────────────────────────────────────────────
DB_POOL_MIN: int = int(os.getenv("DB_POOL_MIN", "1"))
DB_POOL_MAX: int = int(os.getenv("DB_POOL_MAX", "10"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


def get_database_url() -> str:
    """
    Resolve the database connection string.

    Read at call time so a missing value is reported where the
    connection is needed rather than at import.

    Raises:
        ConfigError: If DATABASE_URL is unset or blank.
    """
    url = os.getenv("DATABASE_URL", "").strip()
    if not url:
        raise ConfigError("DATABASE_URL must be set (environment or .env file)")
    return url
