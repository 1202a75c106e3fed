"""HTTP Schemas."""

from apps.age_gate.presentation.http.schemas.verification import (
    CheckoutValidationResponse,
    NoticeResponse,
    VerificationStatusResponse,
    status_label,
)

__all__ = [
    "CheckoutValidationResponse",
    "NoticeResponse",
    "VerificationStatusResponse",
    "status_label",
]
