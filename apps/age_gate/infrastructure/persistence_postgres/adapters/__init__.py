"""PostgreSQL Adapters."""

from apps.age_gate.infrastructure.persistence_postgres.adapters.profile_store_sqla import (
    SqlaProfileStore,
)

__all__ = ["SqlaProfileStore"]
