"""Map service errors to short plain-text HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ito.errors import LinkError

logger = logging.getLogger("ito.web")

INTERNAL_ERROR_MESSAGE = "Error: internal server error"


async def link_error_handler(request: Request, exc: LinkError) -> PlainTextResponse:
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc}",
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=exc.status_code)
    return PlainTextResponse(f"Error: {exc}", status_code=exc.status_code)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Unrouted paths and unsupported methods."""
    return PlainTextResponse(
        f"Error: {exc.detail}",
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    """Missing form fields and malformed path parameters are client errors."""
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())[1:]) or "request"
        problems.append(f"{field}: {error.get('msg', 'invalid')}")
    return PlainTextResponse(
        "Error: " + "; ".join(problems),
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.error(
        f"{request.method} {request.url.path} failed: {exc}",
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return PlainTextResponse(
        INTERNAL_ERROR_MESSAGE,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LinkError, link_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
