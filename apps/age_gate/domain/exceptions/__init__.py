"""Domain Exceptions."""

from apps.age_gate.domain.exceptions.base import DomainError
from apps.age_gate.domain.exceptions.identity import InvalidIdentityError

__all__ = ["DomainError", "InvalidIdentityError"]
