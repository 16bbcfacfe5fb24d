"""Translation of errors into HTTP responses.

This is the only place an error kind is mapped to a status code and the
`{message, stack?}` body.
"""

import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from smolurl.errors import LinkError

logger = logging.getLogger("smolurl.web")


def _format_stack(error: BaseException) -> str:
    if error.__traceback__ is None and isinstance(error, LinkError):
        return f"{type(error).__name__}: {error.message}\n{error.stack}"
    return "".join(traceback.format_exception(type(error), error, error.__traceback__))


def _is_production(request: Request) -> bool:
    config = getattr(request.app.state, "config", None)
    return bool(config is not None and config.is_production)


def error_response(
    error: BaseException,
    production: bool,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    message: str = "Internal server error",
) -> JSONResponse:
    """Build the JSON error body for an error.

    LinkErrors supply their own status and message; anything else uses the
    given defaults.
    """
    if isinstance(error, LinkError):
        status_code = error.status_code
        message = error.message

    body = {"message": message}
    if not production:
        body["stack"] = _format_stack(error)

    return JSONResponse(status_code=status_code, content=body)


async def link_error_handler(request: Request, exc: LinkError) -> JSONResponse:
    logger.warning(f"{type(exc).__name__} in {request.url.path}: {exc.message}")
    return error_response(exc, _is_production(request))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies get the same error shape as rejected links."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()) if part != 'body') or 'body'}: {err.get('msg')}"
        for err in exc.errors()
    )
    logger.warning(f"Malformed request to {request.url.path}: {details}")
    return error_response(
        exc,
        _is_production(request),
        status_code=status.HTTP_400_BAD_REQUEST,
        message=details or "Malformed request body",
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error in {request.url.path}: {exc}", exc_info=True)
    return error_response(exc, _is_production(request))


def register_exception_handlers(app: FastAPI) -> None:
    """Register the error translators on an app."""
    app.add_exception_handler(LinkError, link_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
