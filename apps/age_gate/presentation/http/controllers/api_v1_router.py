"""API v1 Router."""

from fastapi import APIRouter

from apps.age_gate.presentation.http.controllers.general.router import (
    router as general_router,
)
from apps.age_gate.presentation.http.controllers.verification.router import (
    router as verification_router,
)

# 라우트 prefix (레거시 마커 미들웨어에서도 사용)
VERIFICATION_PREFIX = "/age-verification"

router = APIRouter()

# Age verification endpoints
router.include_router(verification_router, prefix=VERIFICATION_PREFIX, tags=["age-verification"])

# General endpoints (health)
router.include_router(general_router, tags=["general"])
