"""FastAPI application entry-point."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import Settings, settings
from app.errors import MetricsUnavailableError
from app.models.responses import ErrorResponse
from app.routers import frontend, health, metrics
from app.services.executor import CommandExecutor
from app.services.metrics import MetricsService
from app.utils.logging import get_logger, setup_logging

log = get_logger(__name__)


async def metrics_unavailable_handler(
    request: Request, exc: MetricsUnavailableError,
) -> JSONResponse:
    log.error("api.metrics_unavailable", path=request.url.path, detail=exc.detail)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(message=exc.message).model_dump(),
    )


def create_app(
    cfg: Settings | None = None,
    executor: CommandExecutor | None = None,
) -> FastAPI:
    """Build the application around an explicit configuration."""
    cfg = cfg or settings
    setup_logging(cfg.log_level, json=cfg.log_json)

    executor = executor or CommandExecutor(
        timeout=cfg.command_timeout_seconds,
        container_runtime=cfg.container_runtime,
    )

    app = FastAPI(
        title="CrowdSec Metrics Dashboard",
        description="CrowdSec decision counters and host resource metrics",
        version=__version__,
    )
    app.state.settings = cfg
    app.state.metrics_service = MetricsService(cfg, executor)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_exception_handler(MetricsUnavailableError, metrics_unavailable_handler)

    app.include_router(health.router)
    app.include_router(metrics.router)
    # Catch-all; keep last
    app.include_router(frontend.router)

    log.info(
        "app.configured",
        container=cfg.crowdsec_container,
        runtime=cfg.container_runtime,
        timeout=cfg.command_timeout_seconds,
        static_dir=cfg.static_dir,
    )
    return app


app = create_app(settings)
