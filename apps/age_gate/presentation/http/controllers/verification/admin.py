"""Admin Controller.

영구 인증 기록 무효화 엔드포인트입니다.
X-Admin-Token 헤더가 설정값 admin_token과 일치해야 합니다.
"""

import hmac

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Response

from apps.age_gate.application.verification.commands import RevokeVerificationInteractor
from apps.age_gate.application.verification.dto import RevokeVerificationRequest
from apps.age_gate.application.verification.exceptions import AdminAuthorizationError
from apps.age_gate.domain.value_objects.identity import UserIdentity
from apps.age_gate.setup.config import Settings, get_settings
from apps.age_gate.setup.dependencies import get_revoke_verification_interactor

ADMIN_TOKEN_HEADER = "X-Admin-Token"

router = APIRouter()


def require_admin(
    x_admin_token: str | None = Header(None, alias=ADMIN_TOKEN_HEADER),
    settings: Settings = Depends(get_settings),
) -> None:
    """관리자 토큰 검증.

    admin_token이 설정되지 않으면 엔드포인트 자체를 숨깁니다 (404).
    """
    if not settings.admin_token:
        raise HTTPException(status_code=404, detail="Not Found")
    if not x_admin_token or not hmac.compare_digest(x_admin_token, settings.admin_token):
        raise AdminAuthorizationError()


@router.delete(
    "/users/{user_id}",
    status_code=204,
    summary="영구 인증 기록 무효화",
    dependencies=[Depends(require_admin)],
)
async def revoke_user_verification(
    user_id: str,
    session_id: str | None = Query(None, description="함께 초기화할 방문자 세션 ID"),
    interactor: RevokeVerificationInteractor = Depends(get_revoke_verification_interactor),
) -> Response:
    await interactor.execute(
        RevokeVerificationRequest(identity=UserIdentity(user_id), session_id=session_id)
    )
    return Response(status_code=204)
