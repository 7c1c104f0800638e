"""Translate domain and storage errors into JSON error responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.domain.errors import DemoServiceError

logger = logging.getLogger(__name__)


async def _service_error(request: Request, exc: DemoServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        return JSONResponse(
            {"error": "Server error", "details": exc.message},
            status_code=exc.status_code,
        )
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # The rejected input is not echoed back: it may be a non-finite float.
    errors = [{k: v for k, v in e.items() if k != "input"} for e in exc.errors()]
    return JSONResponse(
        {"error": "Invalid input", "details": jsonable_encoder(errors)},
        status_code=400,
    )


async def _database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Unhandled database error on %s %s", request.method, request.url.path)
    return JSONResponse({"error": "Server error", "details": str(exc)}, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DemoServiceError, _service_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(SQLAlchemyError, _database_error)
