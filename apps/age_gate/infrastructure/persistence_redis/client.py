"""Redis Client Provider.

방문자 세션용 클라이언트를 제공합니다.

Retry 설정:
    - ExponentialBackoff: 지수 백오프 재시도
    - MAX_RETRIES: 3회 재시도
    - ConnectionError, TimeoutError에서 자동 재시도
    - health_check_interval: 30초마다 연결 상태 확인
"""

from __future__ import annotations

from functools import lru_cache

import redis.asyncio as aioredis
from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff
from redis.exceptions import ConnectionError, TimeoutError

from apps.age_gate.setup.config import get_settings

HEALTH_CHECK_INTERVAL = 30  # seconds
MAX_CONNECTIONS = 50
SOCKET_CONNECT_TIMEOUT = 5.0  # seconds
SOCKET_TIMEOUT = 5.0  # seconds
RETRY_ON_ERROR = [ConnectionError, TimeoutError]
MAX_RETRIES = 3


def _build_async_client(redis_url: str) -> aioredis.Redis:
    """비동기 Redis 클라이언트 생성."""
    retry = Retry(ExponentialBackoff(), retries=MAX_RETRIES)

    return aioredis.from_url(
        redis_url,
        encoding="utf-8",
        decode_responses=True,
        health_check_interval=HEALTH_CHECK_INTERVAL,
        socket_keepalive=True,
        socket_connect_timeout=SOCKET_CONNECT_TIMEOUT,
        socket_timeout=SOCKET_TIMEOUT,
        max_connections=MAX_CONNECTIONS,
        retry=retry,
        retry_on_error=RETRY_ON_ERROR,
    )


@lru_cache
def get_session_redis() -> aioredis.Redis:
    """방문자 세션용 Redis 클라이언트.

    환경변수:
        - AGE_GATE_REDIS_SESSION_URL (default: redis://localhost:6379/4)
    """
    settings = get_settings()
    return _build_async_client(settings.redis_session_url)
