"""Status Controller."""

from fastapi import APIRouter, Depends

from apps.age_gate.application.verification.queries import EvaluateCheckoutQuery
from apps.age_gate.presentation.http.schemas import (
    NoticeResponse,
    VerificationStatusResponse,
    status_label,
)
from apps.age_gate.presentation.http.visitor import VisitorContext, get_visitor_context
from apps.age_gate.setup.dependencies import get_evaluate_checkout_query

router = APIRouter()


@router.get(
    "/status",
    response_model=VerificationStatusResponse,
    summary="현재 방문자의 인증 상태",
)
async def status(
    visitor: VisitorContext = Depends(get_visitor_context),
    query: EvaluateCheckoutQuery = Depends(get_evaluate_checkout_query),
) -> VerificationStatusResponse:
    evaluation = await query.execute(visitor.session_id, visitor.identity)
    return VerificationStatusResponse(
        status=status_label(evaluation.status),
        notice=NoticeResponse.from_notice(evaluation.notice),
    )
