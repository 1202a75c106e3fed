"""PostgreSQL Persistence Layer."""

from apps.age_gate.infrastructure.persistence_postgres.adapters import SqlaProfileStore
from apps.age_gate.infrastructure.persistence_postgres.session import (
    dispose_engine,
    get_async_session,
)

__all__ = ["SqlaProfileStore", "dispose_engine", "get_async_session"]
