"""Verification commands."""

from apps.age_gate.application.verification.commands.callback import (
    VerificationCallbackInteractor,
)
from apps.age_gate.application.verification.commands.revoke import RevokeVerificationInteractor
from apps.age_gate.application.verification.commands.start import StartVerificationInteractor

__all__ = [
    "RevokeVerificationInteractor",
    "StartVerificationInteractor",
    "VerificationCallbackInteractor",
]
