from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from campus_events.services.error_codes import ErrorCode
from campus_events.services.exceptions import (
    AuthenticationRequiredError,
    BackendUnavailableError,
    NotFoundError,
    PermissionDeniedError,
    ServiceError,
    ValidationError,
)

logger = structlog.get_logger()


def status_for_service_error(err: ServiceError) -> int:
    if isinstance(err, ValidationError):
        return 400
    if isinstance(err, AuthenticationRequiredError):
        return 401
    if isinstance(err, PermissionDeniedError):
        return 403
    if isinstance(err, NotFoundError):
        return 404
    if isinstance(err, BackendUnavailableError):
        return 503
    return 500


def error_response(status_code: int, message: str, code: str | None = None) -> JSONResponse:
    content = {"error": message}
    if code is not None:
        content["code"] = str(getattr(code, "value", code))
    return JSONResponse(status_code=status_code, content=content)


def _validation_message(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = str(error.get("msg", "invalid value")).removeprefix("Value error, ")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "invalid request"


async def _service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    status_code = status_for_service_error(exc)
    if status_code >= 500:
        logger.error("service_error", code=str(exc.code), message=exc.message, path=request.url.path)
    return error_response(status_code, exc.message, exc.code)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(400, _validation_message(exc), ErrorCode.INVALID_REQUEST)


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", method=request.method, path=request.url.path)
    return error_response(500, str(exc) or "internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, _service_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
