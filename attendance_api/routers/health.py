from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..core.database import ping

router = APIRouter()


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.get("/health/ready")
async def readiness():
    if await ping():
        return {"status": "ready"}
    return JSONResponse(status_code=503, content={"status": "unavailable"})
