"""StartVerification Command.

OneID 인증 시작 Use Case입니다.
"""

from __future__ import annotations

import logging
import secrets
from typing import TYPE_CHECKING

from apps.age_gate.application.verification.dto import (
    StartVerificationRequest,
    StartVerificationResponse,
)
from apps.age_gate.application.verification.exceptions import ConfigurationError
from apps.age_gate.application.verification.ports import OidcClientUnavailable
from apps.age_gate.application.verification.services.status_store import PendingFlow

if TYPE_CHECKING:
    from apps.age_gate.application.verification.ports import IdentityProviderClientFactory
    from apps.age_gate.application.verification.services import VerificationStatusStore

logger = logging.getLogger(__name__)


class StartVerificationInteractor:
    """인증 시작 Interactor.

    Workflow:
        1. 설정 기반 OneID 클라이언트 획득 (실패 시 ConfigurationError)
        2. 체크아웃 URL을 세션에 저장 (콜백 후 복귀용)
        3. state(CSRF) / PKCE code_verifier 생성 및 세션 저장
        4. 프로바이더 인증 URL 반환

    기존 세션 상태는 콜백이 완료될 때까지 유지됩니다.
    """

    def __init__(
        self,
        status_store: "VerificationStatusStore",
        client_factory: "IdentityProviderClientFactory",
        checkout_url: str,
    ) -> None:
        self._status_store = status_store
        self._client_factory = client_factory
        self._checkout_url = checkout_url

    async def execute(self, request: StartVerificationRequest) -> StartVerificationResponse:
        """인증 URL 생성.

        Raises:
            ConfigurationError: OneID 설정 누락 또는 오류
        """
        result = self._client_factory.get()
        if isinstance(result, OidcClientUnavailable):
            logger.error("OneID client unavailable", extra={"reason": result.reason})
            raise ConfigurationError(result.reason)

        await self._status_store.set_redirect_target(request.session_id, self._checkout_url)

        state = secrets.token_urlsafe(32)
        code_verifier = secrets.token_urlsafe(64)
        await self._status_store.save_pending_flow(
            request.session_id, PendingFlow(state=state, code_verifier=code_verifier)
        )

        authorization_url = result.client.authorization_url(
            state=state, code_verifier=code_verifier
        )

        logger.info("Age verification started")

        return StartVerificationResponse(authorization_url=authorization_url, state=state)
