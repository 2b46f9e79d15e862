"""Public short link routes: create and redirect."""

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

from ..api.schemas import ErrorResponse, ShortenRequest, ShortenResponse
from shortlink.common.url_builder import build_location_header, build_short_url

router = APIRouter()


@router.post(
    "/",
    response_model=ShortenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        422: {"model": ErrorResponse, "description": "URL already shortened"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
        503: {"model": ErrorResponse, "description": "No free identifier found"},
    },
    summary="Create short link",
)
async def shorten(request: Request, body: ShortenRequest):
    """Create a short link for the submitted URL."""
    service = request.app.state.service
    config = request.app.state.config

    link = await service.shorten(body.url)

    return ShortenResponse(
        url=build_short_url(link.identifier, config.base_url),
        clicks=link.clicks,
    )


@router.get(
    "/{identifier}",
    status_code=status.HTTP_308_PERMANENT_REDIRECT,
    responses={
        308: {"description": "Redirect to the original URL"},
        404: {"model": ErrorResponse, "description": "Identifier not found"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Redirect to original URL",
)
async def redirect(request: Request, identifier: str):
    """Redirect to the original URL and count the click."""
    service = request.app.state.service

    long_url = await service.resolve(identifier)

    return RedirectResponse(url=build_location_header(long_url), status_code=status.HTTP_308_PERMANENT_REDIRECT)
