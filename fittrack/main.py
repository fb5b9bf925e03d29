"""
FitTrack - FastAPI Application
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fittrack.core.config import settings
from fittrack.core.exceptions import CorruptDataError
from fittrack.core.logging import setup_logging, get_logger
from fittrack.api import analytics, backup, weights, workouts
from fittrack.services.analytics import AnalyticsCalculator
from fittrack.services.backup import BackupService
from fittrack.services.records import RecordStore
from fittrack.services.storage import SQLiteBackend, StorageAdapter

logger = get_logger(__name__)


def create_app(
    storage: Optional[StorageAdapter] = None,
    calculator: Optional[AnalyticsCalculator] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        storage: Storage adapter to use; a SQLite-backed one is built at startup if None
        calculator: Analytics calculator; built from settings if None
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        setup_logging()
        logger.info("Starting FitTrack", version="1.0.0")

        adapter = storage or StorageAdapter(SQLiteBackend(settings.get_database_url()))
        store = RecordStore(adapter)
        app.state.storage = adapter
        app.state.store = store
        app.state.calculator = calculator or AnalyticsCalculator()
        app.state.backup = BackupService(store)
        logger.info("Storage initialized", backend=adapter.backend_name)

        yield

        # Shutdown
        logger.info("Shutting down FitTrack")

    app = FastAPI(
        title="FitTrack API",
        description="Local weight and workout tracker",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # Raw inputs are left out: inf and nan cannot be rendered as JSON
        errors = [
            {key: value for key, value in error.items() if key != "input"}
            for error in exc.errors()
        ]
        return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})

    @app.exception_handler(CorruptDataError)
    async def corrupt_data_handler(request: Request, exc: CorruptDataError):
        logger.error("Corrupt stored data", key=exc.key, reason=exc.reason)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    # Include routers
    app.include_router(weights.router, prefix="/api/weights", tags=["weights"])
    app.include_router(workouts.router, prefix="/api/workouts", tags=["workouts"])
    app.include_router(analytics.router, prefix="/api/analytics", tags=["analytics"])
    app.include_router(backup.router, prefix="/api/backup", tags=["backup"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "fittrack"}

    return app


app = create_app()
