from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

logger = logging.getLogger("frontend.errors")

NOT_FOUND_BODY = "404 page not found"
SERVER_ERROR_BODY = "Internal Server Error"


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        logger.debug("no route or file for %s %s", request.method, request.url.path)
        return PlainTextResponse(NOT_FOUND_BODY, status_code=exc.status_code)
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    # Runs after the request context is gone; pass the error and id explicitly
    logger.error(
        "unhandled exception for %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
        extra={"request_id": getattr(request.state, "request_id", None)},
    )
    return PlainTextResponse(
        SERVER_ERROR_BODY,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
