"""Redis Adapters."""

from apps.age_gate.infrastructure.persistence_redis.adapters.session_store_redis import (
    RedisSessionStore,
)

__all__ = ["RedisSessionStore"]
