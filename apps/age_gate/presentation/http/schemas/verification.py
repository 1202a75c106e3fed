"""Age Verification HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from apps.age_gate.domain.enums.verification_status import VerificationStatus
from apps.age_gate.domain.value_objects.gate_decision import StatusNotice


def status_label(status: VerificationStatus) -> str:
    """API 응답용 상태 라벨 (unverified / verified / denied / error)."""
    return status.name.lower()


class NoticeResponse(BaseModel):
    """체크아웃 알림."""

    level: str = Field(..., description="알림 레벨 (success / error / notice)")
    message: str = Field(..., description="표시할 메시지")
    retry_link: str | None = Field(None, description="인증 시작 링크")

    @classmethod
    def from_notice(cls, notice: StatusNotice) -> "NoticeResponse":
        return cls(level=notice.level.value, message=notice.message, retry_link=notice.retry_link)


class VerificationStatusResponse(BaseModel):
    """현재 방문자의 인증 상태."""

    status: str = Field(..., description="인증 상태")
    notice: NoticeResponse = Field(..., description="체크아웃 폼 상단 알림")


class CheckoutValidationResponse(BaseModel):
    """체크아웃 검증 결과."""

    allowed: bool = Field(..., description="주문 확정 가능 여부")
    notice: NoticeResponse | None = Field(None, description="차단 사유")
