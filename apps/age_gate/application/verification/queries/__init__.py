"""Verification queries."""

from apps.age_gate.application.verification.queries.evaluate_checkout import (
    EvaluateCheckoutQuery,
)

__all__ = ["EvaluateCheckoutQuery"]
