"""Book Explorer API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - GET / serves the catalog page; /static serves its script
    - Global error handlers map BookExplorerError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized and schema created on startup via lifespan context manager

Run with: uvicorn bookexplorer.main:app --port 5000
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from bookexplorer.api.error_handlers import register_error_handlers
from bookexplorer.api.routes import books, catalog_page, health
from bookexplorer.config import get_settings
from bookexplorer.infrastructure.database import init_db
from bookexplorer.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "client" / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.create_schema()
    logger.info("Book Explorer API started")
    yield
    await manager.dispose()
    logger.info("Book Explorer API shutting down")


app = FastAPI(
    title="Book Explorer API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(books.router)
app.include_router(catalog_page.router)

# Page script for the catalog page; mounted after the API routes
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

register_error_handlers(app)
