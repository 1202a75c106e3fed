"""ProfileStore Port.

인증된 사용자 단위의 영구 키-값 저장소 인터페이스입니다.
"""

from typing import Protocol


class ProfileStore(Protocol):
    """영구 프로필 저장소 인터페이스.

    구현체:
        - SqlaProfileStore (infrastructure/persistence_postgres/)
    """

    async def get(self, identity: str, key: str) -> str | None:
        """사용자 메타 값 조회."""
        ...

    async def set(self, identity: str, key: str, value: str) -> None:
        """사용자 메타 값 저장 (upsert)."""
        ...

    async def delete(self, identity: str, key: str) -> None:
        """사용자 메타 값 삭제."""
        ...
