"""Chart endpoint."""

from __future__ import annotations

import asyncio
import logging
import time

from aspectwire.config import Settings
from aspectwire.schemas.chart import ChartRequest, ChartResponse, ErrorResponse
from ephemeris.chart import build_chart_input, compute_chart
from ephemeris.errors import ChartTimeoutError, InputValidationError, ProviderError
from ephemeris.provider import EphemerisProvider
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_app_settings, get_provider

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.post(
    "/chart",
    response_model=ChartResponse,
    response_model_by_alias=True,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}, 504: {"model": ErrorResponse}},
)
async def create_chart(
    payload: ChartRequest,
    settings: Settings = Depends(get_app_settings),
    provider: EphemerisProvider = Depends(get_provider),
):
    try:
        chart_input = build_chart_input(
            payload.date,
            payload.time,
            payload.tz_offset_minutes,
            payload.orb,
            default_tz_offset_minutes=settings.default_tz_offset_minutes,
            default_orb=settings.default_orb,
            max_orb=settings.max_orb,
        )
    except InputValidationError as exc:
        logger.info("Rejected chart request: %s", exc)
        return _error(400, str(exc))

    timeout = settings.chart_timeout_seconds
    deadline = time.monotonic() + timeout
    try:
        return await asyncio.wait_for(
            asyncio.to_thread(compute_chart, chart_input, provider, deadline=deadline),
            timeout=timeout,
        )
    except ProviderError as exc:
        return _error(502, str(exc))
    except (ChartTimeoutError, TimeoutError):
        logger.warning("Chart computation exceeded %.1fs", timeout)
        return _error(504, f"Chart computation exceeded {timeout:g} seconds.")
