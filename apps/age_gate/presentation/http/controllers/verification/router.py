"""Age Verification Router.

연령 인증 관련 엔드포인트를 통합합니다.
"""

from fastapi import APIRouter

from apps.age_gate.presentation.http.controllers.verification.admin import router as admin_router
from apps.age_gate.presentation.http.controllers.verification.callback import (
    router as callback_router,
)
from apps.age_gate.presentation.http.controllers.verification.checkout import (
    router as checkout_router,
)
from apps.age_gate.presentation.http.controllers.verification.start import router as start_router
from apps.age_gate.presentation.http.controllers.verification.status import (
    router as status_router,
)

router = APIRouter()

router.include_router(start_router)
router.include_router(callback_router)
router.include_router(status_router)
router.include_router(checkout_router)
router.include_router(admin_router)
