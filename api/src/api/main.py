"""FastAPI application factory."""

from __future__ import annotations

import logging

from aspectwire.config import get_settings
from aspectwire.schemas.chart import ErrorResponse
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.middleware.body_limit import BodySizeLimitMiddleware
from api.routers import chart, health

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = str(error.get("msg", "invalid value"))
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request body."


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_validation_error(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content=ErrorResponse(error=message).model_dump())


def create_app() -> FastAPI:
    app = FastAPI(title="Aspectwire API", version="0.1.0")
    settings = get_settings()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(BodySizeLimitMiddleware)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.include_router(health.router, tags=["health"])
    app.include_router(chart.router, prefix="/api", tags=["chart"])
    return app


app = create_app()
