"""Age Verification HTTP 통합 테스트.

TestClient + dependency_overrides로 인메모리 포트를 주입해 전체 플로우를 검증합니다.
"""

from __future__ import annotations

import time
from urllib.parse import parse_qs, urlparse

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from apps.age_gate.application.verification.ports import OidcClientUnavailable
from apps.age_gate.domain.services.checkout_gate import DENIED_MESSAGE, VERIFY_PROMPT_MESSAGE
from apps.age_gate.main import create_app
from apps.age_gate.setup.config import Settings, get_settings
from apps.age_gate.setup.dependencies import (
    get_client_factory,
    get_profile_store,
    get_session_store,
)

SECRET = "test-secret-key-for-testing-only"
ADMIN_TOKEN = "admin-secret-token"
BASE = "/api/v1/age-verification"
CHECKOUT_URL = "https://shop.test/checkout"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        site_url="https://shop.test",
        checkout_url=CHECKOUT_URL,
        oneid_client_id="client-id",
        oneid_client_secret="client-secret",
        session_cookie_secure=False,
        jwt_secret_key=SECRET,
        admin_token=ADMIN_TOKEN,
    )


@pytest.fixture
def client(settings, session_store, profile_store, client_factory) -> TestClient:
    app = create_app(settings)
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_session_store] = lambda: session_store
    app.dependency_overrides[get_profile_store] = lambda: profile_store
    app.dependency_overrides[get_client_factory] = lambda: client_factory
    return TestClient(app, follow_redirects=False)


def _access_token(sub: str = "user-42") -> str:
    now = int(time.time())
    return jwt.encode({"sub": sub, "iat": now, "exp": now + 900}, SECRET, algorithm="HS256")


def _verify(client: TestClient, code: str = "auth-code") -> None:
    """start → callback 플로우 실행."""
    start = client.get(f"{BASE}/start")
    state = parse_qs(urlparse(start.headers["location"]).query)["state"][0]
    client.get(f"{BASE}/callback", params={"code": code, "state": state})


class TestVisitorSession:
    """방문자 세션 쿠키 테스트."""

    def test_cookie_issued_on_first_request(self, client: TestClient) -> None:
        # Act
        response = client.get(f"{BASE}/status")

        # Assert
        assert response.status_code == 200
        set_cookie = response.headers["set-cookie"].lower()
        assert set_cookie.startswith("age_gate_sid=")
        assert "httponly" in set_cookie
        assert "samesite=lax" in set_cookie

    def test_cookie_not_reissued(self, client: TestClient) -> None:
        # Arrange
        client.get(f"{BASE}/status")

        # Act
        response = client.get(f"{BASE}/status")

        # Assert
        assert "set-cookie" not in response.headers


class TestCheckoutGate:
    """체크아웃 게이트 시나리오."""

    def test_new_visitor_is_blocked_with_retry_link(self, client: TestClient) -> None:
        # Act
        response = client.post(f"{BASE}/checkout/validate")

        # Assert
        assert response.status_code == 403
        body = response.json()
        assert body["allowed"] is False
        assert body["notice"]["message"] == VERIFY_PROMPT_MESSAGE
        assert body["notice"]["retry_link"] == f"https://shop.test{BASE}/start"

    def test_full_flow_allows_checkout(
        self, client: TestClient, oidc_client, profile_store
    ) -> None:
        """Block → Start → Callback(true) → 체크아웃 복귀 → Allow."""
        # Arrange
        assert client.post(f"{BASE}/checkout/validate").status_code == 403

        # Act
        start = client.get(f"{BASE}/start")
        state = parse_qs(urlparse(start.headers["location"]).query)["state"][0]
        callback = client.get(f"{BASE}/callback", params={"code": "auth-code", "state": state})
        checkout = client.post(f"{BASE}/checkout/validate")

        # Assert
        assert start.status_code == 302
        assert start.headers["location"].startswith("https://oneid.test/authorize")
        assert callback.status_code == 302
        assert callback.headers["location"] == CHECKOUT_URL
        assert checkout.status_code == 200
        assert checkout.json() == {"allowed": True, "notice": None}
        # 익명 방문자는 영구 기록 없음
        assert profile_store.rows == {}

    def test_logged_in_flow_persists_record(
        self, client: TestClient, profile_store
    ) -> None:
        # Arrange
        client.cookies.set("s_access", _access_token())

        # Act
        _verify(client)

        # Assert
        assert profile_store.rows == {("user-42", "oneid_age_verified"): "true"}

    def test_persistent_record_short_circuits_flow(
        self, client: TestClient, profile_store, client_factory
    ) -> None:
        """영구 기록이 있으면 새 세션에서도 시작 트랜지션 없이 허용."""
        # Arrange
        profile_store.rows[("user-42", "oneid_age_verified")] = "true"
        client.cookies.set("s_access", _access_token())

        # Act
        response = client.post(f"{BASE}/checkout/validate")

        # Assert
        assert response.status_code == 200
        assert response.json()["allowed"] is True
        assert client_factory.calls == 0

    def test_bearer_token_identity(self, client: TestClient, profile_store) -> None:
        # Arrange
        profile_store.rows[("user-42", "oneid_age_verified")] = "true"

        # Act
        response = client.post(
            f"{BASE}/checkout/validate",
            headers={"Authorization": f"Bearer {_access_token()}"},
        )

        # Assert
        assert response.status_code == 200

    def test_invalid_access_token_is_anonymous(self, client: TestClient, profile_store) -> None:
        # Arrange
        profile_store.rows[("user-42", "oneid_age_verified")] = "true"
        client.cookies.set("s_access", "tampered.token.value")

        # Act
        response = client.post(f"{BASE}/checkout/validate")

        # Assert
        assert response.status_code == 403

    def test_denied_claim_blocks_without_retry(
        self, client: TestClient, oidc_client, profile_store
    ) -> None:
        # Arrange
        oidc_client.claim = False
        client.cookies.set("s_access", _access_token())

        # Act
        _verify(client)
        response = client.post(f"{BASE}/checkout/validate")

        # Assert
        assert response.status_code == 403
        assert response.json()["notice"]["message"] == DENIED_MESSAGE
        assert response.json()["notice"]["retry_link"] is None
        assert profile_store.rows == {}


class TestStartAndCallback:
    """시작 / 콜백 라우트 테스트."""

    def test_unconfigured_start_returns_503(
        self, client: TestClient, client_factory
    ) -> None:
        # Arrange
        client_factory.result = OidcClientUnavailable("OneID Client ID or Secret is not set")

        # Act
        response = client.get(f"{BASE}/start")

        # Assert
        assert response.status_code == 503
        assert "location" not in response.headers
        body = response.json()
        assert body["code"] == "CONFIGURATION_ERROR"
        assert "administrator" in body["detail"]
        assert "Secret" not in body["detail"]

    def test_forged_state_sets_error(self, client: TestClient) -> None:
        # Arrange
        client.get(f"{BASE}/start")

        # Act
        callback = client.get(f"{BASE}/callback", params={"code": "c", "state": "forged"})
        status = client.get(f"{BASE}/status")

        # Assert
        assert callback.status_code == 302
        assert callback.headers["location"] == CHECKOUT_URL
        assert status.json()["status"] == "error"
        assert status.json()["notice"]["retry_link"] == f"https://shop.test{BASE}/start"

    def test_provider_denied_access_sets_error(self, client: TestClient) -> None:
        """프로바이더가 code 없이 error로 돌려보낸 경우."""
        # Arrange
        client.get(f"{BASE}/start")

        # Act
        callback = client.get(f"{BASE}/callback", params={"error": "access_denied"})

        # Assert
        assert callback.status_code == 302
        assert client.get(f"{BASE}/status").json()["status"] == "error"

    def test_status_after_verification(self, client: TestClient) -> None:
        # Arrange
        _verify(client)

        # Act
        response = client.get(f"{BASE}/status")

        # Assert
        assert response.json()["status"] == "verified"
        assert response.json()["notice"]["level"] == "success"

    def test_bare_callback_keeps_verified_status(self, client: TestClient) -> None:
        """code/state 없는 콜백 재방문은 확정 상태를 바꾸지 않음."""
        # Arrange
        _verify(client)

        # Act
        callback = client.get(f"{BASE}/callback")
        checkout = client.post(f"{BASE}/checkout/validate")

        # Assert
        assert callback.status_code == 302
        assert callback.headers["location"] == CHECKOUT_URL
        assert checkout.status_code == 200

    def test_two_tabs_second_start_completes(self, client: TestClient) -> None:
        # Arrange
        first = client.get(f"{BASE}/start")
        second = client.get(f"{BASE}/start")
        state_a = parse_qs(urlparse(first.headers["location"]).query)["state"][0]
        state_b = parse_qs(urlparse(second.headers["location"]).query)["state"][0]

        # Act
        client.get(f"{BASE}/callback", params={"code": "code-a", "state": state_a})
        client.get(f"{BASE}/callback", params={"code": "code-b", "state": state_b})

        # Assert
        assert client.get(f"{BASE}/status").json()["status"] == "verified"


class TestLegacyMarkers:
    """레거시 쿼리 마커 테스트."""

    def test_start_marker_on_any_path(self, client: TestClient) -> None:
        response = client.get("/shop/cart", params={"oneid-auth-start": "1"})

        assert response.status_code == 302
        assert response.headers["location"] == f"{BASE}/start"

    def test_callback_marker_forwards_code_and_state(self, client: TestClient) -> None:
        # Act
        response = client.get(
            "/", params={"oneid-callback": "1", "code": "abc", "state": "xyz"}
        )

        # Assert
        assert response.status_code == 302
        location = urlparse(response.headers["location"])
        assert location.path == f"{BASE}/callback"
        assert parse_qs(location.query) == {"code": ["abc"], "state": ["xyz"]}

    @pytest.mark.parametrize("query", ["oneid-auth-start", "oneid-auth-start="])
    def test_start_marker_without_value(self, client: TestClient, query: str) -> None:
        response = client.get(f"/shop/cart?{query}")

        assert response.status_code == 302
        assert response.headers["location"] == f"{BASE}/start"

    def test_bare_callback_marker_keeps_verified_status(self, client: TestClient) -> None:
        # Arrange
        _verify(client)

        # Act
        marker = client.get("/?oneid-callback")
        callback = client.get(marker.headers["location"])

        # Assert
        assert marker.headers["location"] == f"{BASE}/callback"
        assert callback.status_code == 302
        assert client.get(f"{BASE}/status").json()["status"] == "verified"


class TestAdminRevoke:
    """관리자 무효화 라우트 테스트."""

    def test_revoke_removes_record(self, client: TestClient, profile_store) -> None:
        # Arrange
        profile_store.rows[("user-42", "oneid_age_verified")] = "true"

        # Act
        response = client.delete(
            f"{BASE}/users/user-42", headers={"X-Admin-Token": ADMIN_TOKEN}
        )

        # Assert
        assert response.status_code == 204
        assert profile_store.rows == {}

    def test_revoked_user_must_verify_again(self, client: TestClient, profile_store) -> None:
        # Arrange
        profile_store.rows[("user-42", "oneid_age_verified")] = "true"
        client.delete(f"{BASE}/users/user-42", headers={"X-Admin-Token": ADMIN_TOKEN})
        client.cookies.set("s_access", _access_token())

        # Act
        response = client.post(f"{BASE}/checkout/validate")

        # Assert
        assert response.status_code == 403

    def test_wrong_admin_token(self, client: TestClient, profile_store) -> None:
        # Arrange
        profile_store.rows[("user-42", "oneid_age_verified")] = "true"

        # Act
        response = client.delete(f"{BASE}/users/user-42", headers={"X-Admin-Token": "nope"})

        # Assert
        assert response.status_code == 401
        assert response.json()["code"] == "ADMIN_UNAUTHORIZED"
        assert profile_store.rows != {}

    def test_route_hidden_without_admin_token(self, client: TestClient, settings) -> None:
        # Arrange
        settings.admin_token = None

        # Act
        response = client.delete(f"{BASE}/users/user-42", headers={"X-Admin-Token": "x"})

        # Assert
        assert response.status_code == 404


class TestHealth:
    def test_root_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
