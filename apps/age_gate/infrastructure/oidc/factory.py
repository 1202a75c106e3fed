"""OneID Client Factory.

설정에서 OneID 클라이언트를 한 번만 생성하는 memoized 팩토리입니다.
생성 실패는 None 대신 OidcClientUnavailable로 반환합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.age_gate.application.verification.ports import (
    OidcClientReady,
    OidcClientResult,
    OidcClientUnavailable,
)
from apps.age_gate.infrastructure.oidc.oneid_client import OneIdClient
from apps.age_gate.setup.constants import ONEID_PROVIDER_URLS

if TYPE_CHECKING:
    import httpx

    from apps.age_gate.setup.config import Settings

logger = logging.getLogger(__name__)


class OidcClientFactory:
    """IdentityProviderClientFactory 구현체."""

    def __init__(
        self,
        settings: "Settings",
        transport: "httpx.AsyncBaseTransport | None" = None,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._result: OidcClientResult | None = None

    def get(self) -> OidcClientResult:
        if self._result is None:
            self._result = self._build()
        return self._result

    def _build(self) -> OidcClientResult:
        settings = self._settings

        if not settings.oneid_client_id or not settings.oneid_client_secret:
            logger.error("OneID Client ID or Secret is not set in settings")
            return OidcClientUnavailable("OneID Client ID or Secret is not set")

        provider_url = ONEID_PROVIDER_URLS.get(settings.oneid_env)
        if provider_url is None:
            logger.error("Unknown OneID environment", extra={"oneid_env": settings.oneid_env})
            return OidcClientUnavailable(f"Unknown OneID environment: {settings.oneid_env}")

        try:
            client = OneIdClient(
                provider_url=provider_url,
                client_id=settings.oneid_client_id,
                client_secret=settings.oneid_client_secret,
                redirect_uri=settings.callback_url,
                scopes=tuple(settings.oidc_scopes.split()),
                authorize_path=settings.oneid_authorize_path,
                token_path=settings.oneid_token_path,
                userinfo_path=settings.oneid_userinfo_path,
                timeout_seconds=settings.http_timeout_seconds,
                transport=self._transport,
            )
        except Exception as e:
            logger.error(f"OneID client init error: {e}")
            return OidcClientUnavailable(str(e))

        return OidcClientReady(client)
