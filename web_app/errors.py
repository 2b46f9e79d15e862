"""Translate short link errors into JSON error responses."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shortlink.common.logging_config import get_logger
from shortlink.errors import (
    IdentifierSpaceExhaustedError,
    InvalidUrlError,
    LinkNotFoundError,
    StorageUnavailableError,
    UrlAlreadyExistsError,
)

logger = get_logger("web")

GENERIC_SERVER_ERROR = "internal server error"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_url_already_exists(request: Request, exc: UrlAlreadyExistsError):
    logger.warning(f"Rejected duplicate URL: {exc.long_url}")
    return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))


async def handle_link_not_found(request: Request, exc: LinkNotFoundError):
    logger.warning(f"Short link not found: {exc.identifier}")
    return error_response(status.HTTP_404_NOT_FOUND, str(exc))


async def handle_invalid_url(request: Request, exc: InvalidUrlError):
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_request_validation(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_identifier_exhausted(request: Request, exc: IdentifierSpaceExhaustedError):
    logger.error(str(exc))
    return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, "unable to allocate a short link, try again")


async def handle_storage_unavailable(request: Request, exc: StorageUnavailableError):
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error envelope handlers on ``app``."""
    app.add_exception_handler(UrlAlreadyExistsError, handle_url_already_exists)
    app.add_exception_handler(LinkNotFoundError, handle_link_not_found)
    app.add_exception_handler(InvalidUrlError, handle_invalid_url)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(IdentifierSpaceExhaustedError, handle_identifier_exhausted)
    app.add_exception_handler(StorageUnavailableError, handle_storage_unavailable)
