"""Translate errors reaching the HTTP boundary into JSON responses.

`ERROR_STATUS` is the only place that maps an error kind to a status code.
Every error body has the shape `{"success": false, "message": ...}`; in
development mode it also carries the formatted traceback under `stack`.
"""

import logging
import os
import traceback
from typing import Optional, Dict
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from userapi.errors import AppError, AuthError, ConflictError, NotFoundError, ValidationError

load_dotenv()

logger = logging.getLogger(__name__)

ENVIRONMENT = os.getenv("ENVIRONMENT", "production")

INTERNAL_ERROR_MESSAGE = "Internal Server Error"
MALFORMED_JSON_MESSAGE = "Request body is not valid JSON."

ERROR_STATUS = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AuthError: status.HTTP_401_UNAUTHORIZED,
}


def status_for(exc: Exception) -> int:
    """Status for an error; anything unrecognised is a 500."""
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS:
            return ERROR_STATUS[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def is_development() -> bool:
    return ENVIRONMENT.lower() == "development"


def error_response(
    status_code: int,
    message: str,
    exc: Exception,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    content = {"success": False, "message": message}
    if is_development():
        content["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def format_validation_errors(errors) -> str:
    """Join pydantic error entries into one message, e.g. `email: Field required`.

    Request sections and list/character positions are dropped from the location.
    """
    messages = []
    for err in errors:
        if err.get("type") == "json_invalid":
            messages.append(MALFORMED_JSON_MESSAGE)
            continue
        loc = ".".join(
            str(part)
            for part in err.get("loc", ())
            if not isinstance(part, int) and part not in ("body", "query", "path", "header")
        )
        msg = err.get("msg", "Invalid value")
        messages.append(f"{loc}: {msg}" if loc else msg)
    return ", ".join(messages)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    status_code = status_for(exc)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    logger.info(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
    return error_response(status_code, exc.message, exc, headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationError(format_validation_errors(exc.errors()))
    logger.info(f"{request.method} {request.url.path} -> invalid input: {error.message}")
    return error_response(status_for(error), error.message, exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), exc, headers=getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE, exc)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
