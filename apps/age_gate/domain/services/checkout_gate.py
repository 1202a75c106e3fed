"""CheckoutGate Domain Service.

인증 상태를 체크아웃 허용/차단 판정과 UI 알림으로 변환합니다.
상태를 변경하지 않는 순수 로직입니다.
"""

from __future__ import annotations

from apps.age_gate.domain.enums.verification_status import VerificationStatus
from apps.age_gate.domain.value_objects.gate_decision import (
    GateDecision,
    NoticeLevel,
    StatusNotice,
)

VERIFY_PROMPT_MESSAGE = "You must verify your age before placing an order."
DENIED_MESSAGE = "You must be 18 or older to purchase these items. Age verification failed."
ERROR_MESSAGE = "There was an error during age verification. Please try again."

VERIFIED_NOTICE_MESSAGE = "Your age has been successfully verified."
UNVERIFIED_NOTICE_MESSAGE = (
    "This order requires age verification. Please complete checkout to verify."
)


class CheckoutGate:
    """체크아웃 게이트.

    Args:
        start_link: 인증 시작 트랜지션을 발생시키는 URL
    """

    def __init__(self, start_link: str) -> None:
        self._start_link = start_link

    def evaluate(self, status: VerificationStatus) -> GateDecision:
        """주문 확정 가능 여부 판정.

        DENIED는 재시도 링크 없이 차단합니다 (같은 신원은 같은 클레임을 받음).
        """
        if status is VerificationStatus.VERIFIED:
            return GateDecision.allow()
        if status is VerificationStatus.DENIED:
            return GateDecision.block(DENIED_MESSAGE)
        if status is VerificationStatus.ERROR:
            return GateDecision.block(ERROR_MESSAGE, retry_link=self._start_link)
        return GateDecision.block(VERIFY_PROMPT_MESSAGE, retry_link=self._start_link)

    def notice(self, status: VerificationStatus) -> StatusNotice:
        """체크아웃 폼 상단 안내 문구."""
        if status is VerificationStatus.VERIFIED:
            return StatusNotice(level=NoticeLevel.SUCCESS, message=VERIFIED_NOTICE_MESSAGE)
        if status is VerificationStatus.DENIED:
            return StatusNotice(level=NoticeLevel.ERROR, message=DENIED_MESSAGE)
        if status is VerificationStatus.ERROR:
            return StatusNotice(
                level=NoticeLevel.ERROR, message=ERROR_MESSAGE, retry_link=self._start_link
            )
        return StatusNotice(
            level=NoticeLevel.NOTICE,
            message=UNVERIFIED_NOTICE_MESSAGE,
            retry_link=self._start_link,
        )
