"""Ledger API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LedgerError / validation / anything else to JSON
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - create_app() factory plus module-level app: uvicorn serves ledger.main:app,
      tests build the same app and override get_db
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ledger.api.error_handlers import register_error_handlers
from ledger.api.routes import health, transactions
from ledger.config import get_settings
from ledger.infrastructure.database import init_db, close_db
from ledger.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Ledger API started")
    yield
    await close_db()
    logger.info("Ledger API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Ledger API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Explicit registration
    app.include_router(health.router)
    app.include_router(transactions.router)

    register_error_handlers(app)
    return app


app = create_app()
