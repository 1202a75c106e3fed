"""Verification services."""

from apps.age_gate.application.verification.services.resolver import VerificationResolver
from apps.age_gate.application.verification.services.status_store import (
    PendingFlow,
    VerificationStatusStore,
)

__all__ = ["PendingFlow", "VerificationResolver", "VerificationStatusStore"]
