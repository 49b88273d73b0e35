# ioc_kernel/web/errors.py
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ioc_kernel.errors import ConstructionError

logger = logging.getLogger(__name__)


def error_envelope(code: str, message: str, details=None):
    return {"error": {"code": code, "message": message, "details": details or {}}}


async def construction_error_handler(request: Request, exc: ConstructionError) -> JSONResponse:
    details = {}
    if exc.base_type is not None:
        details["base_type"] = getattr(exc.base_type, "__qualname__", repr(exc.base_type))
    if exc.context_type is not None:
        details["context_type"] = getattr(exc.context_type, "__qualname__", repr(exc.context_type))
    logger.error("[kernel] %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(error_envelope("CONSTRUCTION_ERROR", str(exc), details), status_code=500)


def add_error_handlers(app: FastAPI) -> None:
    """Attach kernel exception handlers to app."""
    app.add_exception_handler(ConstructionError, construction_error_handler)
    logger.debug("[kernel] error handlers registered")
