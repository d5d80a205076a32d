"""
main.py
-------
Entry point for the user service.

Responsibilities:
    - Build the FastAPI application (user routes, error mapping, static files).
    - Initialize the database connection pool and schema.
    - Serve the application with uvicorn until terminated.
"""

import sys

import psycopg2
import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from config import HOST, PORT, STATIC_DIR, get_database_url
from db.connection import close_pool, init_pool
from db.init_db import create_tables_pooled
from handlers.errors import register_error_handlers
from handlers.users import router as users_router
from utils.errors import ConfigError, StorageError
from utils.logger import get_logger

logger = get_logger(__name__)


def create_app(static_dir: str = STATIC_DIR) -> FastAPI:
    """
    Build the application.

    Args:
        static_dir: Directory served at ``/``; ``/`` itself returns its index.html.
    """
    app = FastAPI(title="User Service", version="0.1.0")

    register_error_handlers(app)
    app.include_router(users_router)

    # Mounted last so the API routes take precedence over file lookups
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    return app


def main() -> None:
    """Initialize and run the server."""

    # ── 1. Configuration ──────────────────────────────────
    try:
        get_database_url()
    except ConfigError as e:
        logger.critical(str(e))
        sys.exit(1)

    # ── 2. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    try:
        init_pool()
        create_tables_pooled()
    except (psycopg2.Error, StorageError) as e:
        logger.critical(f"Database unavailable at startup: {e}")
        close_pool()
        sys.exit(1)

    # ── 3. Serve ──────────────────────────────────────────
    app = create_app()
    logger.info(f"Starting server at http://{HOST}:{PORT}")
    try:
        uvicorn.run(app, host=HOST, port=PORT, log_config=None)
    finally:
        # ── 4. Cleanup on shutdown ────────────────────────
        close_pool()
        logger.info("Server stopped.")


if __name__ == "__main__":
    main()
