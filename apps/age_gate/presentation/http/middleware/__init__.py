"""HTTP Middleware."""

from apps.age_gate.presentation.http.middleware.legacy_markers import LegacyMarkerMiddleware
from apps.age_gate.presentation.http.middleware.visitor_session import VisitorSessionMiddleware

__all__ = ["LegacyMarkerMiddleware", "VisitorSessionMiddleware"]
