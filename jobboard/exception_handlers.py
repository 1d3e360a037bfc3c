"""Translate domain exceptions into HTTP responses.

Repository and service code only raises; this is the single place where a
failure kind becomes a status code.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from jobboard.errors import (
    DomainValidationError,
    FieldError,
    NotFoundError,
    ReferenceNotFoundError,
    StoreError,
)


logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = {"body", "query", "path"}


def _field_name(loc: tuple[Any, ...] | list[Any]) -> str:
    parts = [str(p) for p in loc if p not in _LOCATION_PREFIXES]
    return ".".join(parts) or "body"


def _message(err: dict[str, Any]) -> str:
    kind = err.get("type")
    ctx = err.get("ctx") or {}
    if kind == "missing":
        return "This field is required"
    if kind == "string_too_short":
        return f"Value is too short (minimum: {ctx.get('min_length')})"
    if kind == "string_too_long":
        return f"Value is too long (maximum: {ctx.get('max_length')})"
    if kind == "greater_than":
        return f"Value must be greater than {ctx.get('gt')}"
    if kind == "greater_than_equal":
        return f"Value must be greater than or equal to {ctx.get('ge')}"
    if kind == "literal_error":
        return f"Invalid value. Allowed values: {ctx.get('expected')}"
    if kind == "value_error" and ctx.get("error") is not None:
        return str(ctx["error"])
    return str(err.get("msg") or "Validation failed")


def validation_error_items(errors: list[dict[str, Any]]) -> list[FieldError]:
    items: list[FieldError] = []
    for err in errors:
        if err.get("type") == "json_invalid":
            items.append(FieldError("body", "Invalid request body"))
            continue
        items.append(FieldError(_field_name(err.get("loc") or ()), _message(err)))
    return items


def _errors_response(items: list[FieldError]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": [item.as_dict() for item in items]},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _errors_response(validation_error_items(list(exc.errors())))


async def domain_validation_handler(request: Request, exc: DomainValidationError) -> JSONResponse:
    return _errors_response(exc.errors)


async def reference_not_found_handler(request: Request, exc: ReferenceNotFoundError) -> JSONResponse:
    return _errors_response([FieldError(exc.field, exc.message)])


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc) or "Not found"})


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("store failure on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(DomainValidationError, domain_validation_handler)
    app.add_exception_handler(ReferenceNotFoundError, reference_not_found_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
