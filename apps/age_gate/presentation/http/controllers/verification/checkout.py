"""Checkout Validation Controller.

주문 확정 직전 체크아웃 게이트 판정 엔드포인트입니다.
"""

import logging

from fastapi import APIRouter, Depends, Response

from apps.age_gate.application.verification.queries import EvaluateCheckoutQuery
from apps.age_gate.presentation.http.schemas import CheckoutValidationResponse, NoticeResponse
from apps.age_gate.presentation.http.visitor import VisitorContext, get_visitor_context
from apps.age_gate.setup.dependencies import get_evaluate_checkout_query

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/checkout/validate",
    response_model=CheckoutValidationResponse,
    summary="체크아웃 게이트",
    responses={403: {"model": CheckoutValidationResponse, "description": "인증 필요 또는 거부"}},
)
async def validate_checkout(
    response: Response,
    visitor: VisitorContext = Depends(get_visitor_context),
    query: EvaluateCheckoutQuery = Depends(get_evaluate_checkout_query),
) -> CheckoutValidationResponse:
    """VERIFIED일 때만 주문을 허용합니다.

    차단 시 403과 함께 사유 메시지를 반환합니다 (UNVERIFIED / ERROR는 재시도 링크 포함).
    """
    evaluation = await query.execute(visitor.session_id, visitor.identity)
    decision = evaluation.decision

    if decision.allowed:
        return CheckoutValidationResponse(allowed=True)

    logger.info("Checkout blocked", extra={"status": evaluation.status.name})
    response.status_code = 403
    return CheckoutValidationResponse(
        allowed=False,
        notice=NoticeResponse.from_notice(decision.notice),
    )
