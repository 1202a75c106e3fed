"""Identity Exceptions."""

from apps.age_gate.domain.exceptions.base import DomainError


class InvalidIdentityError(DomainError):
    """유효하지 않은 사용자 식별자."""

    def __init__(self, reason: str = "Invalid identity") -> None:
        super().__init__(reason)
