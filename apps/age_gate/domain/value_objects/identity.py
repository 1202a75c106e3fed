"""UserIdentity Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from apps.age_gate.domain.exceptions.identity import InvalidIdentityError


@dataclass(frozen=True, slots=True)
class UserIdentity:
    """인증된 사이트 사용자 식별자.

    사이트 access token의 sub 클레임 값입니다. 영구 프로필 저장소의 키로 사용됩니다.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise InvalidIdentityError("Identity cannot be empty")
        if len(self.value) > 255:
            raise InvalidIdentityError("Identity too long (max 255 characters)")

    def __str__(self) -> str:
        return self.value
