"""Verification Exceptions."""

from apps.age_gate.application.common.exceptions.base import ApplicationError


class ConfigurationError(ApplicationError):
    """OneID 설정 누락 또는 오류.

    인증 시작 단계에서는 치명적 오류로 처리되며 사용자 재시도 대상이 아닙니다.
    """

    def __init__(self, reason: str = "OneID is not configured") -> None:
        self.reason = reason
        super().__init__(reason)


class ProviderExchangeError(ApplicationError):
    """OneID 코드 교환 또는 클레임 조회 실패."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"OneID exchange failed: {reason}")


class InvalidStateError(ApplicationError):
    """콜백 state 검증 실패."""

    def __init__(self, reason: str = "Invalid or expired state") -> None:
        super().__init__(reason)


class AdminAuthorizationError(ApplicationError):
    """관리자 토큰 검증 실패."""

    def __init__(self, reason: str = "Invalid admin token") -> None:
        super().__init__(reason)
