"""Visitor Context."""

from apps.age_gate.presentation.http.visitor.context import (
    VisitorContext,
    get_visitor_context,
    get_visitor_session_id,
)

__all__ = ["VisitorContext", "get_visitor_context", "get_visitor_session_id"]
