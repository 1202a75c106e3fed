"""HTTP Controllers."""

from apps.age_gate.presentation.http.controllers.api_v1_router import (
    VERIFICATION_PREFIX,
    router as api_v1_router,
)

__all__ = ["VERIFICATION_PREFIX", "api_v1_router"]
