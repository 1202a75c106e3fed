"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.age_gate.application.common.exceptions import ApplicationError
from apps.age_gate.application.verification.exceptions import (
    AdminAuthorizationError,
    ConfigurationError,
)
from apps.age_gate.domain.exceptions.base import DomainError

logger = logging.getLogger(__name__)

# 내부 설정 상세는 노출하지 않음
CONFIGURATION_ERROR_MESSAGE = (
    "OneID is not configured correctly. Please contact the site administrator."
)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        logger.error("OneID configuration error", extra={"reason": exc.reason})
        return JSONResponse(
            status_code=503,
            content={"detail": CONFIGURATION_ERROR_MESSAGE, "code": "CONFIGURATION_ERROR"},
        )

    @app.exception_handler(AdminAuthorizationError)
    async def admin_authorization_handler(request: Request, exc: AdminAuthorizationError):
        return JSONResponse(
            status_code=401,
            content={"detail": exc.message, "code": "ADMIN_UNAUTHORIZED"},
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "DOMAIN_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
