"""VerificationResolver - 현재 요청의 인증 상태 계산.

1. 세션에 확정 상태(VERIFIED/DENIED/ERROR)가 있으면 그대로 반환
2. 로그인 사용자의 영구 기록이 verified면 세션을 VERIFIED로 채우고 반환
3. 그 외 UNVERIFIED
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.age_gate.domain.enums.verification_status import VerificationStatus

if TYPE_CHECKING:
    from apps.age_gate.application.verification.services.status_store import (
        VerificationStatusStore,
    )
    from apps.age_gate.domain.value_objects.identity import UserIdentity


class VerificationResolver:
    """인증 상태 리졸버.

    외부 프로바이더를 호출하지 않으며, 부수효과는 세션 캐시 채우기뿐입니다.
    """

    def __init__(self, status_store: "VerificationStatusStore") -> None:
        self._status_store = status_store

    async def resolve(
        self, session_id: str, identity: "UserIdentity | None" = None
    ) -> VerificationStatus:
        status = await self._status_store.session_status(session_id)
        if status.is_settled:
            return status

        if identity is not None and await self._status_store.is_identity_verified(identity):
            await self._status_store.set_session_status(session_id, VerificationStatus.VERIFIED)
            return VerificationStatus.VERIFIED

        return VerificationStatus.UNVERIFIED
