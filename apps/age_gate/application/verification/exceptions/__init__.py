"""Verification flow exceptions."""

from apps.age_gate.application.verification.exceptions.verification import (
    AdminAuthorizationError,
    ConfigurationError,
    InvalidStateError,
    ProviderExchangeError,
)

__all__ = [
    "AdminAuthorizationError",
    "ConfigurationError",
    "InvalidStateError",
    "ProviderExchangeError",
]
