"""Table Mappings."""

from apps.age_gate.infrastructure.persistence_postgres.mappings.user_meta import (
    SCHEMA_NAME,
    metadata,
    user_meta_table,
)

__all__ = ["SCHEMA_NAME", "metadata", "user_meta_table"]
