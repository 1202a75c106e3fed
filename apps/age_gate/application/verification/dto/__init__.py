"""Verification DTOs."""

from apps.age_gate.application.verification.dto.verification import (
    CheckoutEvaluation,
    RevokeVerificationRequest,
    StartVerificationRequest,
    StartVerificationResponse,
    VerificationCallbackRequest,
    VerificationCallbackResponse,
)

__all__ = [
    "CheckoutEvaluation",
    "RevokeVerificationRequest",
    "StartVerificationRequest",
    "StartVerificationResponse",
    "VerificationCallbackRequest",
    "VerificationCallbackResponse",
]
