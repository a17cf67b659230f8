"""Security-decision and host metrics endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from app.models.metrics import SecurityDecision, SystemSnapshot
from app.models.responses import ErrorResponse
from app.services.metrics import MetricsService

router = APIRouter(
    prefix="/api",
    tags=["metrics"],
    responses={500: {"model": ErrorResponse}},
)


def get_metrics_service(request: Request) -> MetricsService:
    return request.app.state.metrics_service


@router.get("/crowdsec-metrics", response_model=list[SecurityDecision])
async def crowdsec_metrics(
    service: MetricsService = Depends(get_metrics_service),
) -> list[SecurityDecision]:
    """Decisions reported by ``cscli metrics``, highest count first."""
    return await service.get_security_metrics()


@router.get("/system-metrics", response_model=SystemSnapshot)
async def system_metrics(
    service: MetricsService = Depends(get_metrics_service),
) -> SystemSnapshot:
    """Uptime, load, memory and root-disk usage of the host."""
    return await service.get_system_metrics()
