"""Redis Session Store.

SessionStore 포트의 구현체입니다.
세션 하나를 Redis Hash 하나로 저장하고, 쓰기마다 TTL을 갱신합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.age_gate.infrastructure.persistence_redis.constants import SESSION_KEY_PREFIX

if TYPE_CHECKING:
    import redis.asyncio as aioredis


class RedisSessionStore:
    """Redis 기반 방문자 세션 저장소.

    SessionStore 구현체.
    """

    def __init__(self, redis: "aioredis.Redis", ttl_seconds: int) -> None:
        self._redis = redis
        self._ttl_seconds = ttl_seconds

    async def get(self, session_id: str, key: str) -> str | None:
        """세션 값 조회."""
        return await self._redis.hget(self._key(session_id), key)

    async def set(self, session_id: str, key: str, value: str) -> None:
        """세션 값 저장 및 TTL 갱신.

        HSET + EXPIRE를 하나의 트랜잭션 pipeline으로 수행합니다.
        """
        redis_key = self._key(session_id)
        pipe = self._redis.pipeline(transaction=True)
        pipe.hset(redis_key, key, value)
        pipe.expire(redis_key, self._ttl_seconds)
        await pipe.execute()

    async def delete(self, session_id: str, *keys: str) -> None:
        """세션 값 삭제."""
        if not keys:
            return
        await self._redis.hdel(self._key(session_id), *keys)

    @staticmethod
    def _key(session_id: str) -> str:
        return f"{SESSION_KEY_PREFIX}{session_id}"
