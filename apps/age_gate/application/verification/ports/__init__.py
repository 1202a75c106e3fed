"""Verification ports."""

from apps.age_gate.application.verification.ports.identity_provider import (
    IdentityProviderClient,
    IdentityProviderClientFactory,
    OidcClientReady,
    OidcClientResult,
    OidcClientUnavailable,
    OidcTokens,
)
from apps.age_gate.application.verification.ports.profile_store import ProfileStore
from apps.age_gate.application.verification.ports.session_store import SessionStore

__all__ = [
    "IdentityProviderClient",
    "IdentityProviderClientFactory",
    "OidcClientReady",
    "OidcClientResult",
    "OidcClientUnavailable",
    "OidcTokens",
    "ProfileStore",
    "SessionStore",
]
