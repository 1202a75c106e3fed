"""Domain Value Objects."""

from apps.age_gate.domain.value_objects.gate_decision import (
    GateDecision,
    NoticeLevel,
    StatusNotice,
)
from apps.age_gate.domain.value_objects.identity import UserIdentity

__all__ = ["GateDecision", "NoticeLevel", "StatusNotice", "UserIdentity"]
