"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends

from apps.age_gate.setup.config import Settings, get_settings

if TYPE_CHECKING:
    import redis.asyncio as aioredis
    from sqlalchemy.ext.asyncio import AsyncSession


# ============================================================
# Infrastructure Dependencies
# ============================================================


async def get_db_session() -> AsyncGenerator["AsyncSession", None]:
    """DB 세션 제공자."""
    from apps.age_gate.infrastructure.persistence_postgres import get_async_session

    async for session in get_async_session():
        yield session


def get_session_redis() -> "aioredis.Redis":
    """방문자 세션용 Redis 클라이언트 제공자."""
    from apps.age_gate.infrastructure.persistence_redis import get_session_redis

    return get_session_redis()


# ============================================================
# Store Dependencies (Adapters)
# ============================================================


def get_session_store(
    redis: "aioredis.Redis" = Depends(get_session_redis),
    settings: Settings = Depends(get_settings),
):
    """SessionStore 제공자."""
    from apps.age_gate.infrastructure.persistence_redis import RedisSessionStore

    return RedisSessionStore(redis, settings.session_ttl_seconds)


async def get_profile_store(
    session: "AsyncSession" = Depends(get_db_session),
):
    """ProfileStore 제공자."""
    from apps.age_gate.infrastructure.persistence_postgres import SqlaProfileStore

    return SqlaProfileStore(session)


def get_status_store(
    session_store=Depends(get_session_store),
    profile_store=Depends(get_profile_store),
):
    """VerificationStatusStore 제공자."""
    from apps.age_gate.application.verification.services import VerificationStatusStore

    return VerificationStatusStore(session_store, profile_store)


# ============================================================
# Service Dependencies
# ============================================================


def get_client_factory(settings: Settings = Depends(get_settings)):
    """IdentityProviderClientFactory 제공자 (요청당 1회 생성)."""
    from apps.age_gate.infrastructure.oidc import OidcClientFactory

    return OidcClientFactory(settings)


def get_identity_resolver(settings: Settings = Depends(get_settings)):
    """사이트 access token 식별기 제공자."""
    from apps.age_gate.infrastructure.security import JwtIdentityResolver

    return JwtIdentityResolver(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )


def get_checkout_gate(settings: Settings = Depends(get_settings)):
    """CheckoutGate 제공자."""
    from apps.age_gate.domain.services import CheckoutGate

    return CheckoutGate(settings.start_url)


def get_verification_resolver(status_store=Depends(get_status_store)):
    """VerificationResolver 제공자."""
    from apps.age_gate.application.verification.services import VerificationResolver

    return VerificationResolver(status_store)


# ============================================================
# Use Case Dependencies
# ============================================================


async def get_start_verification_interactor(
    status_store=Depends(get_status_store),
    client_factory=Depends(get_client_factory),
    settings: Settings = Depends(get_settings),
):
    """StartVerificationInteractor 제공자."""
    from apps.age_gate.application.verification.commands import StartVerificationInteractor

    return StartVerificationInteractor(
        status_store=status_store,
        client_factory=client_factory,
        checkout_url=settings.checkout_url,
    )


async def get_verification_callback_interactor(
    status_store=Depends(get_status_store),
    client_factory=Depends(get_client_factory),
    settings: Settings = Depends(get_settings),
):
    """VerificationCallbackInteractor 제공자."""
    from apps.age_gate.application.verification.commands import VerificationCallbackInteractor

    return VerificationCallbackInteractor(
        status_store=status_store,
        client_factory=client_factory,
        checkout_url=settings.checkout_url,
        claim_name=settings.age_claim_name,
    )


async def get_revoke_verification_interactor(
    status_store=Depends(get_status_store),
):
    """RevokeVerificationInteractor 제공자."""
    from apps.age_gate.application.verification.commands import RevokeVerificationInteractor

    return RevokeVerificationInteractor(status_store)


async def get_evaluate_checkout_query(
    resolver=Depends(get_verification_resolver),
    gate=Depends(get_checkout_gate),
):
    """EvaluateCheckoutQuery 제공자."""
    from apps.age_gate.application.verification.queries import EvaluateCheckoutQuery

    return EvaluateCheckoutQuery(resolver=resolver, gate=gate)
