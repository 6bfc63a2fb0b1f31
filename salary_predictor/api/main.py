"""FastAPI application entry point for the salary predictor.

The dataset is loaded once in the lifespan. A failed load does not stop the
app: the gate stays closed, /health reports ``degraded`` and predictions
return 503 until POST /v1/dataset/reload succeeds.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from salary_predictor import __version__
from salary_predictor.api.predictions import router as predictions_router
from salary_predictor.config.settings import Environment, Settings, get_settings
from salary_predictor.engine.service import ServiceGate

APP_VERSION = __version__

_LOG_NAME_TO_LEVEL: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(settings: Settings) -> None:
    """Structured logging for the app, plain stdlib level for library modules."""
    level = _LOG_NAME_TO_LEVEL[settings.LOG_LEVEL.value]
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.ENVIRONMENT == Environment.DEV
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


logger: structlog.stdlib.BoundLogger = structlog.get_logger()


def create_app(
    settings: Settings | None = None,
    gate: ServiceGate | None = None,
) -> FastAPI:
    """Build the FastAPI app. Tests pass a pre-started ``gate``."""
    settings = settings or get_settings()
    configure_logging(settings)
    gate = gate or ServiceGate(
        settings.DATASET_SOURCE,
        timeout=settings.DATASET_TIMEOUT,
        strict=settings.STRICT_COVERAGE,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if not gate.is_ready and gate.last_error is None:
            ready = await gate.start()
            logger.info("dataset_load", source=str(gate.source), ready=ready)
        yield

    app = FastAPI(
        title="Salary Predictor API",
        description="Japan/USA annual salary estimates from a static reference dataset.",
        version=APP_VERSION,
        lifespan=lifespan,
    )
    app.state.gate = gate
    app.state.settings = settings

    # --- CORS middleware ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.ENVIRONMENT == Environment.DEV else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(predictions_router)

    # --- Infrastructure Endpoints ---

    @app.get("/health")
    async def health_check() -> dict:
        """Liveness probe. Returns 200 always; ``degraded`` until the dataset loads."""
        checks: dict[str, bool] = {"api": True, "dataset": gate.is_ready}
        all_ok = all(checks.values())
        body: dict = {
            "status": "ok" if all_ok else "degraded",
            "version": APP_VERSION,
            "environment": settings.ENVIRONMENT.value,
            "checks": checks,
        }
        if gate.last_error is not None:
            body["error"] = str(gate.last_error)
        return body

    @app.get("/api/version")
    async def get_version() -> dict[str, str]:
        """Return application name, version, and environment."""
        return {
            "name": "salary-predictor",
            "version": APP_VERSION,
            "environment": settings.ENVIRONMENT.value,
        }

    return app
