"""SQLAlchemy Profile Store.

ProfileStore 포트의 구현체입니다.
쓰기는 각각 독립 트랜잭션으로 커밋됩니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert

from apps.age_gate.infrastructure.persistence_postgres.mappings import user_meta_table

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class SqlaProfileStore:
    """PostgreSQL 기반 사용자 메타 저장소.

    ProfileStore 구현체.
    """

    def __init__(self, session: "AsyncSession") -> None:
        self._session = session

    async def get(self, identity: str, key: str) -> str | None:
        """사용자 메타 값 조회."""
        stmt = select(user_meta_table.c.meta_value).where(
            user_meta_table.c.user_id == identity,
            user_meta_table.c.meta_key == key,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def set(self, identity: str, key: str, value: str) -> None:
        """사용자 메타 값 upsert."""
        stmt = insert(user_meta_table).values(user_id=identity, meta_key=key, meta_value=value)
        stmt = stmt.on_conflict_do_update(
            index_elements=[user_meta_table.c.user_id, user_meta_table.c.meta_key],
            set_={"meta_value": stmt.excluded.meta_value, "updated_at": func.now()},
        )
        await self._session.execute(stmt)
        await self._session.commit()

    async def delete(self, identity: str, key: str) -> None:
        """사용자 메타 값 삭제."""
        stmt = delete(user_meta_table).where(
            user_meta_table.c.user_id == identity,
            user_meta_table.c.meta_key == key,
        )
        await self._session.execute(stmt)
        await self._session.commit()
