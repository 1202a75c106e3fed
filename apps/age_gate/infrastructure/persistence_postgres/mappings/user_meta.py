"""UserMeta Table Mapping.

사용자 단위 키-값 메타 테이블 (WordPress usermeta와 같은 형태).

타입 규칙 (Unbounded String 기본 전략):
    - TEXT: 기본 문자열 타입
"""

from sqlalchemy import Column, DateTime, MetaData, PrimaryKeyConstraint, Table, Text
from sqlalchemy.sql import func

SCHEMA_NAME = "age_gate"

metadata = MetaData(schema=SCHEMA_NAME)

user_meta_table = Table(
    "user_meta",
    metadata,
    Column("user_id", Text, nullable=False),
    Column("meta_key", Text, nullable=False),
    Column("meta_value", Text, nullable=False),
    Column(
        "updated_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
    PrimaryKeyConstraint("user_id", "meta_key", name="pk_user_meta"),
)
