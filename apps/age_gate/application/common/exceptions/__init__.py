"""Application Exceptions.

공통 예외만 포함합니다. 인증 플로우 예외는 다음에서 직접 import하세요:
  - apps.age_gate.application.verification.exceptions.*
"""

from apps.age_gate.application.common.exceptions.base import ApplicationError

__all__ = ["ApplicationError"]
