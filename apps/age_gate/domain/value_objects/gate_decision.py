"""Gate Decision Value Objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NoticeLevel(str, Enum):
    """UI 알림 레벨 (WooCommerce notice 타입과 동일)."""

    SUCCESS = "success"
    ERROR = "error"
    NOTICE = "notice"


@dataclass(frozen=True, slots=True)
class StatusNotice:
    """체크아웃 화면에 표시할 알림.

    retry_link가 있으면 UI는 인증 시작 링크를 함께 렌더링합니다.
    """

    level: NoticeLevel
    message: str
    retry_link: str | None = None


@dataclass(frozen=True, slots=True)
class GateDecision:
    """체크아웃 게이트 판정 결과.

    allowed=True이면 Allow, 아니면 Block(message, retry_link).
    """

    allowed: bool
    notice: StatusNotice | None = None

    @classmethod
    def allow(cls) -> GateDecision:
        return cls(allowed=True)

    @classmethod
    def block(cls, message: str, retry_link: str | None = None) -> GateDecision:
        return cls(
            allowed=False,
            notice=StatusNotice(level=NoticeLevel.ERROR, message=message, retry_link=retry_link),
        )

    @property
    def message(self) -> str | None:
        return self.notice.message if self.notice else None

    @property
    def retry_link(self) -> str | None:
        return self.notice.retry_link if self.notice else None
