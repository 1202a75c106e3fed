"""Age Gate API Application Entry Point.

Clean Architecture 기반 OneID 연령 인증 서비스입니다.

분산 트레이싱 통합:
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (OneID token/userinfo 호출)
- Redis 자동 계측 (방문자 세션)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.age_gate.presentation.http.controllers import VERIFICATION_PREFIX, api_v1_router
from apps.age_gate.presentation.http.errors import register_exception_handlers
from apps.age_gate.presentation.http.middleware import (
    LegacyMarkerMiddleware,
    VisitorSessionMiddleware,
)
from apps.age_gate.setup.config import Settings, get_settings
from apps.age_gate.setup.constants import SERVICE_NAME, SERVICE_VERSION
from apps.age_gate.setup.logging import setup_logging
from apps.age_gate.setup.tracing import (
    configure_tracing,
    instrument_fastapi,
    instrument_httpx,
    instrument_redis,
    shutdown_tracing,
)

logger = logging.getLogger(__name__)

# OpenTelemetry 분산 트레이싱 설정
configure_tracing()
instrument_httpx()
instrument_redis()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리."""
    # Startup
    logger.info("Starting Age Gate API")

    yield

    # Shutdown
    logger.info("Shutting down Age Gate API")
    from apps.age_gate.infrastructure.persistence_postgres import dispose_engine

    await dispose_engine()
    shutdown_tracing()


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = settings or get_settings()

    # 로깅 설정
    setup_logging("DEBUG" if settings.environment == "local" else "INFO")

    app = FastAPI(
        title=settings.app_name,
        description="OneID 연령 인증 및 체크아웃 게이트 (Clean Architecture)",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )

    verification_path = f"{settings.api_v1_prefix}{VERIFICATION_PREFIX}"

    # 레거시 쿼리 마커 (?oneid-auth-start=1, ?oneid-callback=1)
    app.add_middleware(
        LegacyMarkerMiddleware,
        start_path=f"{verification_path}/start",
        callback_path=f"{verification_path}/callback",
    )

    # 방문자 세션 쿠키 (레거시 마커 처리보다 바깥쪽)
    app.add_middleware(
        VisitorSessionMiddleware,
        cookie_name=settings.session_cookie_name,
        max_age=settings.session_ttl_seconds,
        secure=settings.session_cookie_secure,
    )

    # CORS 설정
    cors_origins = (
        settings.cors_origins.split(",") if settings.cors_origins else ["http://localhost:3000"]
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # OpenTelemetry FastAPI instrumentation
    instrument_fastapi(app)

    # 라우터 등록
    app.include_router(api_v1_router, prefix=settings.api_v1_prefix)

    # Health check (루트)
    @app.get("/health")
    async def root_health():
        return {"status": "healthy", "service": SERVICE_NAME, "version": SERVICE_VERSION}

    return app


# 애플리케이션 인스턴스
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.age_gate.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
