"""Redis Persistence Layer."""

from apps.age_gate.infrastructure.persistence_redis.adapters import RedisSessionStore
from apps.age_gate.infrastructure.persistence_redis.client import get_session_redis

__all__ = ["RedisSessionStore", "get_session_redis"]
