import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.core.config import Settings, get_settings
from app.core.errors import BackendError, backend_error_handler
from app.core.logging import setup_logging
from app.db.database import Database
from app.routers import system, flashcards

logger = logging.getLogger(__name__)

ASSETS_DIR = Path(__file__).resolve().parent / "assets"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Démarrage : tables créées si besoin.
    Arrêt : fermeture du pool de connexions.
    """
    settings: Settings = app.state.settings
    database: Database = app.state.database
    logger.info("Starting %s %s (%s) on %s", settings.APP_NAME, settings.APP_VERSION, settings.APP_ENV, database.safe_url)

    if settings.CREATE_TABLES:
        database.create_tables()

    yield

    logger.info("Stopping %s...", settings.APP_NAME)
    database.dispose()


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Flashcards : création, liste et édition des réponses (HTML rendu côté serveur)",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = database or Database(
        settings.DATABASE_URL,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        echo=settings.DB_ECHO,
    )

    app.add_exception_handler(BackendError, backend_error_handler)

    # Assets (css/js)
    app.mount("/assets", StaticFiles(directory=str(ASSETS_DIR)), name="assets")

    # Routers
    app.include_router(system.router)
    app.include_router(flashcards.router)

    return app


app = create_app()
