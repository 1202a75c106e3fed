"""Domain Services."""

from apps.age_gate.domain.services.checkout_gate import CheckoutGate

__all__ = ["CheckoutGate"]
