#!/usr/bin/env python3
"""
Exception handlers mapping domain errors onto HTTP responses.
"""

import logging
from typing import Any, Dict, List
from fastapi import FastAPI, Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.errors import SkillboardError, NotFoundError, InvalidInputError

logger = logging.getLogger(__name__)


def _error_body(error: str, type_name: str, details: List[Dict[str, Any]] = None) -> Dict[str, Any]:
    body = {
        "success": False,
        "error": error,
        "type": type_name
    }
    if details is not None:
        body["details"] = details
    return body


def _format_loc(loc) -> str:
    """('body', 'skills', 2, 'proficiency') -> 'skills[2].proficiency'"""
    field = ""
    for part in loc:
        if part in ("body", "path", "query"):
            continue
        if isinstance(part, int):
            field += f"[{part}]"
        else:
            field += f".{part}" if field else str(part)
    return field


async def service_exception_handler(
    request: Request,
    exc: SkillboardError
) -> JSONResponse:
    """
    Handle domain exceptions raised by the scoring and ranking services.

    Args:
        request: The FastAPI request.
        exc: The domain exception.

    Returns:
        JSONResponse with error details.
    """
    if isinstance(exc, NotFoundError):
        logger.info(f"{request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=404, content=_error_body(str(exc), exc.__class__.__name__))

    if isinstance(exc, InvalidInputError):
        logger.info(f"{request.method} {request.url.path}: {exc} {exc.details}")
        return JSONResponse(
            status_code=400,
            content=_error_body(str(exc), exc.__class__.__name__, exc.details)
        )

    logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=_error_body("Internal server error", "InternalError")
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Report request schema violations as 400 with field-level detail.
    """
    details = [
        {"field": _format_loc(err.get("loc", ())), "message": err.get("msg", "invalid value")}
        for err in exc.errors()
    ]
    logger.info(f"{request.method} {request.url.path}: invalid request {details}")
    return JSONResponse(
        status_code=400,
        content=_error_body("Invalid request data", "InvalidInputError", details)
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.detail, "HTTPException")
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions without leaking internals.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content=_error_body("Internal server error", "InternalError")
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SkillboardError, service_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
