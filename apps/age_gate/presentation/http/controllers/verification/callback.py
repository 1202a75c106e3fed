"""Callback Controller.

OneID 콜백 처리 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from apps.age_gate.application.verification.commands import VerificationCallbackInteractor
from apps.age_gate.application.verification.dto import VerificationCallbackRequest
from apps.age_gate.presentation.http.visitor import VisitorContext, get_visitor_context
from apps.age_gate.setup.dependencies import get_verification_callback_interactor

router = APIRouter()


@router.get(
    "/callback",
    status_code=302,
    response_class=RedirectResponse,
    summary="OneID 콜백 처리",
)
async def callback(
    code: str = Query("", description="OneID 인증 코드"),
    state: str = Query("", description="상태 값"),
    error: str | None = Query(None, description="프로바이더 오류 코드"),
    visitor: VisitorContext = Depends(get_visitor_context),
    interactor: VerificationCallbackInteractor = Depends(get_verification_callback_interactor),
) -> RedirectResponse:
    """OneID 콜백을 처리하고 체크아웃으로 리다이렉트합니다.

    결과(VERIFIED / DENIED / ERROR)는 세션에 기록되며, 실패 상세는 브라우저에 노출하지 않습니다.
    code나 state가 없는 요청은 이미 확정된 상태를 바꾸지 않습니다.
    """
    result = await interactor.execute(
        VerificationCallbackRequest(
            session_id=visitor.session_id,
            code=code,
            state=state,
            identity=visitor.identity,
            error=error or None,
        )
    )
    return RedirectResponse(url=result.redirect_url, status_code=302)
