"""EvaluateCheckout Query.

현재 방문자의 인증 상태로 체크아웃 허용 여부를 판정합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.age_gate.application.verification.dto import CheckoutEvaluation

if TYPE_CHECKING:
    from apps.age_gate.application.verification.services import VerificationResolver
    from apps.age_gate.domain.services import CheckoutGate
    from apps.age_gate.domain.value_objects.identity import UserIdentity


class EvaluateCheckoutQuery:
    """체크아웃 게이트 Query."""

    def __init__(self, resolver: "VerificationResolver", gate: "CheckoutGate") -> None:
        self._resolver = resolver
        self._gate = gate

    async def execute(
        self, session_id: str, identity: "UserIdentity | None" = None
    ) -> CheckoutEvaluation:
        status = await self._resolver.resolve(session_id, identity)
        return CheckoutEvaluation(
            status=status,
            decision=self._gate.evaluate(status),
            notice=self._gate.notice(status),
        )
