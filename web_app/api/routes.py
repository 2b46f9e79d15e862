"""Operational API routes."""

from fastapi import APIRouter, Request
from datetime import datetime, timezone

from .schemas import ErrorResponse, HealthResponse, LinkInfoResponse
from shortlink.common.url_builder import build_short_url
from shortlink.errors import LinkNotFoundError

router = APIRouter()


@router.get(
    "/links/{identifier}",
    response_model=LinkInfoResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Identifier not found"},
    },
    summary="Get link information",
    description="Get a short link's target and click count without counting a click.",
)
async def get_link_info(request: Request, identifier: str):
    """Get information about a short link."""
    service = request.app.state.service
    config = request.app.state.config

    link = await service.get_link(identifier)
    if link is None:
        raise LinkNotFoundError(identifier)

    return LinkInfoResponse(
        identifier=link.identifier,
        url=link.long_url,
        short_url=build_short_url(link.identifier, config.base_url),
        clicks=link.clicks,
        created_at=link.created_at,
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    health = await service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        database="healthy" if health["database"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
