"""General Router.

Health check 엔드포인트입니다.
"""

from fastapi import APIRouter

from apps.age_gate.setup.constants import SERVICE_NAME, SERVICE_VERSION

router = APIRouter()


@router.get("/health", summary="Liveness")
async def health():
    return {"status": "healthy", "service": SERVICE_NAME, "version": SERVICE_VERSION}
