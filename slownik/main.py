import logging
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from slownik.auth.router import router as auth_router
from slownik.categories.router import admin_router as admin_categories_router
from slownik.categories.router import router as categories_router
from slownik.config import settings
from slownik.database import Database
from slownik.dictionary.router import router as dictionary_router
from slownik.dictionary.router import search_router
from slownik.entries.router import router as admin_entries_router
from slownik.exceptions import register_exception_handlers
from slownik.parts_of_speech.router import admin_router as admin_parts_of_speech_router
from slownik.parts_of_speech.router import router as parts_of_speech_router
from slownik.stats.router import router as stats_router
from slownik.submissions.router import router as submissions_router
from slownik.utils.logging import configure_logging

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


def _run_migrations() -> None:
    import subprocess
    subprocess.run(["alembic", "upgrade", "head"], check=True)


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Build the application.

    ``database`` is used as-is when given (tests pass their own); otherwise one
    is created from settings at startup. Either way it lives on
    ``app.state.database`` and is disposed at shutdown.
    """
    config_path = configure_logging(settings.LOG_CONFIG_FILE, settings.LOG_LEVEL)
    if config_path:
        logger.info("[Startup] Logging configured from %s", config_path)
    else:
        logger.info("[Startup] Logging config file not found, using basic configuration")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.DESCRIPTION,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        swagger_ui_parameters={"docExpansion": "none"}
    )
    app.state.database = database

    # Add CORS middleware
    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin)
                           for origin in settings.BACKEND_CORS_ORIGINS],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    # Include routers
    app.include_router(dictionary_router, prefix=settings.API_PREFIX)
    app.include_router(search_router, prefix=settings.API_PREFIX)
    app.include_router(categories_router, prefix=settings.API_PREFIX)
    app.include_router(parts_of_speech_router, prefix=settings.API_PREFIX)
    app.include_router(submissions_router, prefix=settings.API_PREFIX)
    app.include_router(auth_router, prefix=settings.API_PREFIX)
    app.include_router(stats_router, prefix=settings.API_PREFIX)
    app.include_router(admin_entries_router, prefix=settings.API_PREFIX)
    app.include_router(admin_categories_router, prefix=settings.API_PREFIX)
    app.include_router(admin_parts_of_speech_router, prefix=settings.API_PREFIX)

    # Root endpoint
    @app.get("/")
    async def root():
        return {
            "message": "Witej we Śląskim Słowniku Majsterkowym!",
            "version": settings.VERSION,
            "docs": "/docs",
            "redoc": "/redoc"
        }

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    @app.on_event("startup")
    async def startup_event():
        logger.info("Application starting up...")

        # Optional: auto run alembic migrations on startup
        if settings.AUTO_MIGRATE_ON_STARTUP:
            try:
                _run_migrations()
                logger.info("[Startup] Alembic migrations applied")
            except Exception as e:
                logger.error(f"[Startup] Alembic migration failed: {e}")

        if app.state.database is None:
            app.state.database = Database()
        logger.info("[Startup] Database ready")

    @app.on_event("shutdown")
    async def shutdown_event():
        if app.state.database is not None:
            await app.state.database.dispose()
        logger.info("Application shut down")

    # Log every API call that fails (4xx/5xx)
    @app.middleware("http")
    async def log_api_errors(request: Request, call_next):
        response = await call_next(request)
        if response.status_code >= 500:
            logger.error("[%s] %s %s", response.status_code, request.method, request.url.path)
        elif response.status_code >= 400:
            logger.warning("[%s] %s %s", response.status_code, request.method, request.url.path)
        return response

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
