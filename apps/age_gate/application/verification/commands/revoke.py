"""RevokeVerification Command.

영구 인증 기록 무효화 Use Case입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.age_gate.application.verification.dto import RevokeVerificationRequest

if TYPE_CHECKING:
    from apps.age_gate.application.verification.services import VerificationStatusStore


class RevokeVerificationInteractor:
    """영구 인증 기록 무효화 Interactor.

    다른 세션에 캐시된 VERIFIED는 해당 세션이 만료될 때까지 유지됩니다.
    session_id가 주어지면 그 세션의 캐시도 함께 제거합니다.
    """

    def __init__(self, status_store: "VerificationStatusStore") -> None:
        self._status_store = status_store

    async def execute(self, request: RevokeVerificationRequest) -> None:
        await self._status_store.revoke_identity(request.identity)
        if request.session_id:
            await self._status_store.clear_session_status(request.session_id)
