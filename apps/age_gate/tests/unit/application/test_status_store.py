"""VerificationStatusStore 단위 테스트."""

from __future__ import annotations

import pytest

from apps.age_gate.application.verification.services import PendingFlow
from apps.age_gate.application.verification.services.status_store import (
    PROFILE_VERIFIED_KEY,
    SESSION_REDIRECT_KEY,
    SESSION_STATE_KEY,
    SESSION_STATUS_KEY,
)
from apps.age_gate.domain.enums.verification_status import VerificationStatus


class TestSessionTier:
    """세션 저장소 경로 테스트."""

    @pytest.mark.asyncio
    async def test_missing_status_is_unverified(self, status_store, session_id) -> None:
        assert await status_store.session_status(session_id) is VerificationStatus.UNVERIFIED

    @pytest.mark.asyncio
    async def test_set_settled_status_stores_legacy_value(
        self, status_store, session_store, session_id
    ) -> None:
        # Act
        await status_store.set_session_status(session_id, VerificationStatus.DENIED)

        # Assert
        assert session_store.sessions[session_id][SESSION_STATUS_KEY] == "false"
        assert await status_store.session_status(session_id) is VerificationStatus.DENIED

    @pytest.mark.asyncio
    async def test_set_unverified_removes_key(
        self, status_store, session_store, session_id
    ) -> None:
        # Arrange
        await status_store.set_session_status(session_id, VerificationStatus.ERROR)

        # Act
        await status_store.set_session_status(session_id, VerificationStatus.UNVERIFIED)

        # Assert
        assert SESSION_STATUS_KEY not in session_store.sessions[session_id]

    @pytest.mark.asyncio
    async def test_redirect_target(self, status_store, session_store, session_id) -> None:
        await status_store.set_redirect_target(session_id, "https://shop.test/checkout")

        assert session_store.sessions[session_id][SESSION_REDIRECT_KEY] == (
            "https://shop.test/checkout"
        )
        assert await status_store.redirect_target(session_id) == "https://shop.test/checkout"

    @pytest.mark.asyncio
    async def test_pending_flow_is_consumed_once(
        self, status_store, session_store, session_id
    ) -> None:
        # Arrange
        await status_store.save_pending_flow(
            session_id, PendingFlow(state="state-1", code_verifier="verifier-1")
        )

        # Act
        first = await status_store.consume_pending_flow(session_id, "state-1")
        second = await status_store.consume_pending_flow(session_id, "state-1")

        # Assert
        assert first == PendingFlow(state="state-1", code_verifier="verifier-1")
        assert second is None
        assert SESSION_STATE_KEY not in session_store.sessions[session_id]

    @pytest.mark.asyncio
    async def test_mismatched_state_keeps_pending_flow(
        self, status_store, session_store, session_id
    ) -> None:
        """불일치 state는 저장된 flow를 지우지 않음."""
        # Arrange
        await status_store.save_pending_flow(
            session_id, PendingFlow(state="state-1", code_verifier="verifier-1")
        )

        # Act
        mismatched = await status_store.consume_pending_flow(session_id, "state-other")
        matched = await status_store.consume_pending_flow(session_id, "state-1")

        # Assert
        assert mismatched is None
        assert matched == PendingFlow(state="state-1", code_verifier="verifier-1")

    @pytest.mark.asyncio
    async def test_empty_state_never_matches(self, status_store, session_id) -> None:
        # Arrange
        await status_store.save_pending_flow(session_id, PendingFlow(state="state-1"))

        # Act & Assert
        assert await status_store.consume_pending_flow(session_id, "") is None
        assert await status_store.consume_pending_flow(session_id, "state-1") is not None

    @pytest.mark.asyncio
    async def test_consume_without_pending_flow(self, status_store, session_id) -> None:
        assert await status_store.consume_pending_flow(session_id, "state-1") is None


class TestProfileTier:
    """영구 저장소 경로 테스트."""

    @pytest.mark.asyncio
    async def test_mark_and_check_identity(self, status_store, profile_store, identity) -> None:
        # Act
        await status_store.mark_identity_verified(identity)

        # Assert
        assert profile_store.rows[(identity.value, PROFILE_VERIFIED_KEY)] == "true"
        assert await status_store.is_identity_verified(identity) is True

    @pytest.mark.asyncio
    async def test_unknown_identity_not_verified(self, status_store, identity) -> None:
        assert await status_store.is_identity_verified(identity) is False

    @pytest.mark.asyncio
    async def test_non_true_value_is_not_verified(
        self, status_store, profile_store, identity
    ) -> None:
        profile_store.rows[(identity.value, PROFILE_VERIFIED_KEY)] = "false"

        assert await status_store.is_identity_verified(identity) is False

    @pytest.mark.asyncio
    async def test_revoke_identity(self, status_store, profile_store, identity) -> None:
        # Arrange
        await status_store.mark_identity_verified(identity)

        # Act
        await status_store.revoke_identity(identity)

        # Assert
        assert profile_store.rows == {}
        assert await status_store.is_identity_verified(identity) is False
