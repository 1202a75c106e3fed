"""Domain Enums."""

from apps.age_gate.domain.enums.verification_status import VerificationStatus

__all__ = ["VerificationStatus"]
