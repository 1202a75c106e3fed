"""OneID OIDC Adapters."""

from apps.age_gate.infrastructure.oidc.factory import OidcClientFactory
from apps.age_gate.infrastructure.oidc.oneid_client import OneIdClient

__all__ = ["OidcClientFactory", "OneIdClient"]
