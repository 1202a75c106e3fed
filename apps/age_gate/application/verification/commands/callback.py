"""VerificationCallback Command.

OneID 콜백 처리 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.age_gate.application.verification.dto import (
    VerificationCallbackRequest,
    VerificationCallbackResponse,
)
from apps.age_gate.application.verification.exceptions import (
    InvalidStateError,
    ProviderExchangeError,
)
from apps.age_gate.application.verification.ports import OidcClientUnavailable
from apps.age_gate.domain.enums.verification_status import VerificationStatus

if TYPE_CHECKING:
    from apps.age_gate.application.verification.ports import (
        IdentityProviderClient,
        IdentityProviderClientFactory,
    )
    from apps.age_gate.application.verification.services import VerificationStatusStore

logger = logging.getLogger(__name__)


class VerificationCallbackInteractor:
    """OneID 콜백 Interactor.

    프로바이더 오류는 모두 이 경계에서 잡아 VerificationStatus로 변환합니다.
    어떤 경우에도 체크아웃으로 리다이렉트할 URL을 반환합니다.

    Workflow:
        1. code/state가 빠진 요청은 확정 상태를 덮어쓰지 않음
        2. 클라이언트 획득 (실패 시 ERROR)
        3. state 검증 및 소비 (일치할 때만)
        4. 코드 교환 → 클레임 조회
        5. 세션 상태 기록 (VERIFIED면 로그인 사용자 영구 기록)
        6. 저장된 복귀 URL 또는 기본 체크아웃 URL 반환
    """

    def __init__(
        self,
        status_store: "VerificationStatusStore",
        client_factory: "IdentityProviderClientFactory",
        checkout_url: str,
        claim_name: str = "age_over_18",
    ) -> None:
        self._status_store = status_store
        self._client_factory = client_factory
        self._checkout_url = checkout_url
        self._claim_name = claim_name

    async def execute(self, request: VerificationCallbackRequest) -> VerificationCallbackResponse:
        if request.error or not request.code or not request.state:
            return await self._incomplete(request)

        result = self._client_factory.get()
        if isinstance(result, OidcClientUnavailable):
            logger.error("OneID client unavailable on callback", extra={"reason": result.reason})
            await self._status_store.set_session_status(
                request.session_id, VerificationStatus.ERROR
            )
            return VerificationCallbackResponse(
                status=VerificationStatus.ERROR, redirect_url=self._checkout_url
            )

        status = await self._exchange(result.client, request)
        return await self._finish(request, status)

    async def _incomplete(
        self, request: VerificationCallbackRequest
    ) -> VerificationCallbackResponse:
        """code 없이 돌아온 콜백. 네트워크 호출 없이 처리합니다."""
        if request.error and request.state:
            pending = await self._status_store.consume_pending_flow(
                request.session_id, request.state
            )
            if pending is not None:
                logger.warning("OneID returned an error", extra={"error": request.error})
                return await self._finish(request, VerificationStatus.ERROR)

        current = await self._status_store.session_status(request.session_id)
        if current.is_settled:
            logger.info(
                "Incomplete OneID callback ignored", extra={"status": current.name}
            )
            return VerificationCallbackResponse(
                status=current, redirect_url=await self._redirect_url(request.session_id)
            )

        logger.warning("Incomplete OneID callback", extra={"error": request.error})
        return await self._finish(request, VerificationStatus.ERROR)

    async def _finish(
        self, request: VerificationCallbackRequest, status: VerificationStatus
    ) -> VerificationCallbackResponse:
        await self._status_store.set_session_status(request.session_id, status)

        if status is VerificationStatus.VERIFIED and request.identity is not None:
            try:
                await self._status_store.mark_identity_verified(request.identity)
            except Exception:
                # 세션은 VERIFIED 유지, 다음 세션에서 재인증
                logger.exception("Failed to persist age verification")

        logger.info(
            "Age verification callback handled",
            extra={"status": status.name, "logged_in": request.identity is not None},
        )

        return VerificationCallbackResponse(
            status=status, redirect_url=await self._redirect_url(request.session_id)
        )

    async def _redirect_url(self, session_id: str) -> str:
        return await self._status_store.redirect_target(session_id) or self._checkout_url

    async def _exchange(
        self, client: "IdentityProviderClient", request: VerificationCallbackRequest
    ) -> VerificationStatus:
        pending = await self._status_store.consume_pending_flow(
            request.session_id, request.state
        )

        try:
            if pending is None:
                raise InvalidStateError()
            tokens = await client.authenticate(
                code=request.code, code_verifier=pending.code_verifier
            )
            claim = await client.request_user_info(tokens, self._claim_name)
        except (InvalidStateError, ProviderExchangeError) as e:
            logger.warning("OneID callback failed", extra={"error": e.message})
            return VerificationStatus.ERROR
        except Exception:
            logger.exception("Unexpected OneID callback failure")
            return VerificationStatus.ERROR

        # 엄격한 bool True만 인정
        if claim is True:
            return VerificationStatus.VERIFIED
        return VerificationStatus.DENIED
