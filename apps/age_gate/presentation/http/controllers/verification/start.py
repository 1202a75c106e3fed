"""Start Controller.

OneID 인증 시작 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from apps.age_gate.application.verification.commands import StartVerificationInteractor
from apps.age_gate.application.verification.dto import StartVerificationRequest
from apps.age_gate.presentation.http.visitor import get_visitor_session_id
from apps.age_gate.setup.dependencies import get_start_verification_interactor

router = APIRouter()


@router.get(
    "/start",
    status_code=302,
    response_class=RedirectResponse,
    summary="OneID 인증 시작",
    responses={503: {"description": "OneID 설정 오류"}},
)
async def start(
    session_id: str = Depends(get_visitor_session_id),
    interactor: StartVerificationInteractor = Depends(get_start_verification_interactor),
) -> RedirectResponse:
    """OneID 인증 페이지로 리다이렉트합니다.

    설정이 없으면 ConfigurationError → 503 (재시도 링크 없음).
    """
    result = await interactor.execute(StartVerificationRequest(session_id=session_id))
    return RedirectResponse(url=result.authorization_url, status_code=302)
