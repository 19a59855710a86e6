"""Error envelopes and exception handlers for the porutham API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from pydantic import BaseModel, Field

from ..engine.nakshatra import UnknownStarError

LOG = logging.getLogger(__name__)

UNKNOWN_STAR = "UNKNOWN_STAR"


class ErrorEnvelope(BaseModel):
    """Error payload returned by every failing endpoint."""

    code: str = Field(description="Machine readable error code.")
    message: str = Field(description="Human friendly summary of the error.")
    details: Any | None = Field(
        default=None, description="Optional structured context for the error."
    )


def unknown_star_envelope(exc: UnknownStarError) -> ErrorEnvelope:
    return ErrorEnvelope(
        code=UNKNOWN_STAR,
        message=str(exc),
        details={"name": exc.name},
    )


def _envelope_from_detail(detail: Any, status_code: int) -> ErrorEnvelope:
    status = HTTPStatus(status_code)
    if isinstance(detail, ErrorEnvelope):
        return detail
    if isinstance(detail, Mapping):
        data = dict(detail)
        return ErrorEnvelope(
            code=str(data.pop("code", None) or status.name),
            message=str(data.pop("message", None) or status.phrase),
            details=data.pop("details", None) or (data or None),
        )
    if isinstance(detail, str):
        return ErrorEnvelope(code=status.name, message=detail)
    return ErrorEnvelope(code=status.name, message=status.phrase, details=detail)


async def http_exception_handler(_: Request, exc: HTTPException) -> ORJSONResponse:
    envelope = _envelope_from_detail(exc.detail, exc.status_code)
    return ORJSONResponse(status_code=exc.status_code, content=envelope.model_dump())


async def validation_exception_handler(
    _: Request, exc: RequestValidationError
) -> ORJSONResponse:
    envelope = ErrorEnvelope(
        code="VALIDATION_ERROR",
        message="Request validation failed.",
        details=exc.errors(),
    )
    return ORJSONResponse(status_code=422, content=envelope.model_dump())


async def unknown_star_handler(_: Request, exc: UnknownStarError) -> ORJSONResponse:
    return ORJSONResponse(status_code=422, content=unknown_star_envelope(exc).model_dump())


async def unhandled_exception_handler(_: Request, exc: Exception) -> ORJSONResponse:  # pragma: no cover - defensive
    LOG.exception("Unhandled error while serving request")
    envelope = ErrorEnvelope(
        code="INTERNAL_ERROR",
        message="An unexpected error occurred while processing the request.",
        details={"type": exc.__class__.__name__},
    )
    return ORJSONResponse(status_code=500, content=envelope.model_dump())


def install_error_handlers(app: FastAPI) -> None:
    """Register the porutham exception handlers on ``app``."""

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(UnknownStarError, unknown_star_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = [
    "UNKNOWN_STAR",
    "ErrorEnvelope",
    "http_exception_handler",
    "install_error_handlers",
    "unhandled_exception_handler",
    "unknown_star_envelope",
    "unknown_star_handler",
    "validation_exception_handler",
]
