"""Initial age_gate schema.

Revision ID: 0001
Revises: None
Create Date: 2026-10-19

Schema: age_gate.*
"""

from typing import Sequence

from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create age_gate schema tables."""
    op.execute("CREATE SCHEMA IF NOT EXISTS age_gate")

    # ============================================
    # age_gate.user_meta 테이블
    # 영구 인증 기록 (meta_key='oneid_age_verified', meta_value='true')
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS age_gate.user_meta (
            user_id TEXT NOT NULL,
            meta_key TEXT NOT NULL,
            meta_value TEXT NOT NULL,
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),

            CONSTRAINT pk_user_meta PRIMARY KEY (user_id, meta_key)
        )
    """)

    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_user_meta_key
        ON age_gate.user_meta(meta_key)
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS age_gate.user_meta")
