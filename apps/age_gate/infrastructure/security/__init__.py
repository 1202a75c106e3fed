"""Security Adapters."""

from apps.age_gate.infrastructure.security.identity import JwtIdentityResolver

__all__ = ["JwtIdentityResolver"]
