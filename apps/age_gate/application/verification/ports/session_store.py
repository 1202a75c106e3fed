"""SessionStore Port.

방문자 브라우징 세션 단위의 휘발성 키-값 저장소 인터페이스입니다.
"""

from typing import Protocol


class SessionStore(Protocol):
    """방문자 세션 저장소 인터페이스.

    구현체:
        - RedisSessionStore (infrastructure/persistence_redis/)
    """

    async def get(self, session_id: str, key: str) -> str | None:
        """세션 값 조회.

        Returns:
            저장된 값 또는 None (없거나 세션 만료)
        """
        ...

    async def set(self, session_id: str, key: str, value: str) -> None:
        """세션 값 저장. 세션이 없으면 생성합니다."""
        ...

    async def delete(self, session_id: str, *keys: str) -> None:
        """세션 값 삭제."""
        ...
