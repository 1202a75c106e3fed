"""VerificationStatus Enum."""

from enum import Enum


class VerificationStatus(str, Enum):
    """연령 인증 상태.

    저장 값은 레거시 플러그인의 세션 값과 동일합니다.
    UNVERIFIED는 기록이 없을 때의 기본값이며 세션에 저장되지 않습니다.
    """

    UNVERIFIED = "not_verified"
    VERIFIED = "true"
    DENIED = "false"
    ERROR = "error"

    @property
    def is_settled(self) -> bool:
        """세션에 캐시되는 확정 상태 여부."""
        return self is not VerificationStatus.UNVERIFIED

    @classmethod
    def from_stored(cls, value: str | None) -> "VerificationStatus":
        """저장소 값에서 상태 복원. 알 수 없는 값은 UNVERIFIED."""
        if value is None:
            return cls.UNVERIFIED
        try:
            return cls(value)
        except ValueError:
            return cls.UNVERIFIED
