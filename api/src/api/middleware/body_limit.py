"""Request body size limit middleware."""

from __future__ import annotations

import logging

from aspectwire.config import get_settings
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

_BODY_METHODS = {"POST", "PUT", "PATCH"}


def _declared_length(request: Request) -> int | None:
    raw = request.headers.get("content-length", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _too_large() -> Response:
    return Response(
        content='{"ok":false,"error":"Request body too large"}',
        status_code=413,
        media_type="application/json",
    )


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        if request.method not in _BODY_METHODS:
            return await call_next(request)

        limit = get_settings().max_body_bytes
        declared = _declared_length(request)
        if declared is not None and declared > limit:
            logger.info("Rejected %s %s: declared body %d > %d bytes", request.method, request.url.path, declared, limit)
            return _too_large()

        # Chunked uploads carry no content-length; read and measure
        if declared is None:
            body = await request.body()
            if len(body) > limit:
                logger.info("Rejected %s %s: body %d > %d bytes", request.method, request.url.path, len(body), limit)
                return _too_large()

        return await call_next(request)
