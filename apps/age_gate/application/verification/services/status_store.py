"""VerificationStatusStore - 2단 읽기 캐시.

세션 저장소(빠른 경로)와 영구 프로필 저장소(느린 경로)를 하나의 인터페이스로 묶습니다.
영구 저장소에는 VERIFIED 사실만 기록되며 DENIED/ERROR는 세션에만 남습니다.
"""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from apps.age_gate.domain.enums.verification_status import VerificationStatus

if TYPE_CHECKING:
    from apps.age_gate.application.verification.ports import ProfileStore, SessionStore
    from apps.age_gate.domain.value_objects.identity import UserIdentity

logger = logging.getLogger(__name__)

# 레거시 플러그인과 동일한 키
SESSION_STATUS_KEY = "oneid_age_verified"
SESSION_REDIRECT_KEY = "oneid_redirect_back_url"
SESSION_STATE_KEY = "oneid_pending_state"
SESSION_CODE_VERIFIER_KEY = "oneid_code_verifier"
PROFILE_VERIFIED_KEY = "oneid_age_verified"
PROFILE_VERIFIED_VALUE = "true"


@dataclass(frozen=True, slots=True)
class PendingFlow:
    """시작 트랜지션에서 저장한 state와 PKCE verifier."""

    state: str
    code_verifier: str | None = None


class VerificationStatusStore:
    """인증 상태 저장소 어댑터.

    Collaborators:
        - SessionStore: 방문자 세션 (휘발성)
        - ProfileStore: 사용자 메타 (영구)
    """

    def __init__(self, session_store: "SessionStore", profile_store: "ProfileStore") -> None:
        self._session_store = session_store
        self._profile_store = profile_store

    # ------------------------------------------------------------
    # Session tier
    # ------------------------------------------------------------

    async def session_status(self, session_id: str) -> VerificationStatus:
        value = await self._session_store.get(session_id, SESSION_STATUS_KEY)
        return VerificationStatus.from_stored(value)

    async def set_session_status(self, session_id: str, status: VerificationStatus) -> None:
        if not status.is_settled:
            await self._session_store.delete(session_id, SESSION_STATUS_KEY)
            return
        await self._session_store.set(session_id, SESSION_STATUS_KEY, status.value)

    async def clear_session_status(self, session_id: str) -> None:
        await self._session_store.delete(session_id, SESSION_STATUS_KEY)

    async def redirect_target(self, session_id: str) -> str | None:
        return await self._session_store.get(session_id, SESSION_REDIRECT_KEY)

    async def set_redirect_target(self, session_id: str, url: str) -> None:
        await self._session_store.set(session_id, SESSION_REDIRECT_KEY, url)

    async def save_pending_flow(self, session_id: str, flow: PendingFlow) -> None:
        await self._session_store.set(session_id, SESSION_STATE_KEY, flow.state)
        if flow.code_verifier:
            await self._session_store.set(session_id, SESSION_CODE_VERIFIER_KEY, flow.code_verifier)
        else:
            await self._session_store.delete(session_id, SESSION_CODE_VERIFIER_KEY)

    async def consume_pending_flow(
        self, session_id: str, expected_state: str
    ) -> PendingFlow | None:
        """pending state 검증 후 삭제 (일회용).

        state가 일치할 때만 삭제합니다. 불일치하면 None을 반환하고
        저장된 flow는 그대로 두어 다른 탭의 콜백이 이어서 완료될 수 있습니다.
        """
        state = await self._session_store.get(session_id, SESSION_STATE_KEY)
        if not state or not expected_state:
            return None
        if not hmac.compare_digest(state, expected_state):
            return None
        code_verifier = await self._session_store.get(session_id, SESSION_CODE_VERIFIER_KEY)
        await self._session_store.delete(session_id, SESSION_STATE_KEY, SESSION_CODE_VERIFIER_KEY)
        return PendingFlow(state=state, code_verifier=code_verifier)

    # ------------------------------------------------------------
    # Profile tier
    # ------------------------------------------------------------

    async def is_identity_verified(self, identity: "UserIdentity") -> bool:
        value = await self._profile_store.get(identity.value, PROFILE_VERIFIED_KEY)
        return value == PROFILE_VERIFIED_VALUE

    async def mark_identity_verified(self, identity: "UserIdentity") -> None:
        await self._profile_store.set(identity.value, PROFILE_VERIFIED_KEY, PROFILE_VERIFIED_VALUE)
        logger.info("Age verification persisted", extra={"identity": identity.value})

    async def revoke_identity(self, identity: "UserIdentity") -> None:
        await self._profile_store.delete(identity.value, PROFILE_VERIFIED_KEY)
        logger.info("Age verification revoked", extra={"identity": identity.value})
