"""HTTP Error Handling."""

from apps.age_gate.presentation.http.errors.handlers import register_exception_handlers

__all__ = ["register_exception_handlers"]
