"""Health check and service index."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def service_index():
    return {"ok": True, "service": "aspects-backend", "routes": ["POST /api/chart"]}


@router.get("/health")
async def health_check():
    return {"status": "ok", "service": "aspectwire-api"}
