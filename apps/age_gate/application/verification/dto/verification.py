"""Verification DTOs."""

from dataclasses import dataclass

from apps.age_gate.domain.enums.verification_status import VerificationStatus
from apps.age_gate.domain.value_objects.gate_decision import GateDecision, StatusNotice
from apps.age_gate.domain.value_objects.identity import UserIdentity


@dataclass(frozen=True, slots=True)
class StartVerificationRequest:
    """인증 시작 요청."""

    session_id: str


@dataclass(frozen=True, slots=True)
class StartVerificationResponse:
    """인증 시작 응답."""

    authorization_url: str
    state: str


@dataclass(frozen=True, slots=True)
class VerificationCallbackRequest:
    """OneID 콜백 요청."""

    session_id: str
    code: str
    state: str
    identity: UserIdentity | None = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class VerificationCallbackResponse:
    """OneID 콜백 처리 결과."""

    status: VerificationStatus
    redirect_url: str


@dataclass(frozen=True, slots=True)
class RevokeVerificationRequest:
    """영구 인증 기록 무효화 요청."""

    identity: UserIdentity
    session_id: str | None = None


@dataclass(frozen=True, slots=True)
class CheckoutEvaluation:
    """체크아웃 게이트 평가 결과."""

    status: VerificationStatus
    decision: GateDecision
    notice: StatusNotice
