"""OneID OIDC Client.

IdentityProviderClient 포트의 구현체입니다.
엔드포인트 경로는 설정값을 사용합니다 (discovery 없음).
"""

from __future__ import annotations

import base64
import hashlib
import logging
from typing import Any
from urllib.parse import urlencode

import httpx

from apps.age_gate.application.verification.exceptions import ProviderExchangeError
from apps.age_gate.application.verification.ports import OidcTokens

logger = logging.getLogger(__name__)


class OneIdClient:
    """OneID authorization-code 클라이언트."""

    def __init__(
        self,
        *,
        provider_url: str,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        scopes: tuple[str, ...],
        authorize_path: str,
        token_path: str,
        userinfo_path: str,
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.provider_url = provider_url.rstrip("/")
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.scopes = scopes
        self._authorize_url = f"{self.provider_url}{authorize_path}"
        self._token_url = f"{self.provider_url}{token_path}"
        self._userinfo_url = f"{self.provider_url}{userinfo_path}"
        self._timeout = timeout_seconds
        self._transport = transport

    @staticmethod
    def _compute_code_challenge(code_verifier: str) -> str:
        """PKCE code_challenge 생성 (S256)."""
        digest = hashlib.sha256(code_verifier.encode()).digest()
        return base64.urlsafe_b64encode(digest).rstrip(b"=").decode()

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    def authorization_url(self, *, state: str, code_verifier: str | None = None) -> str:
        """인증 URL 생성."""
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": " ".join(self.scopes),
            "state": state,
        }
        if code_verifier:
            params["code_challenge"] = self._compute_code_challenge(code_verifier)
            params["code_challenge_method"] = "S256"
        return f"{self._authorize_url}?{urlencode(params)}"

    async def authenticate(self, *, code: str, code_verifier: str | None = None) -> OidcTokens:
        """인증 코드로 토큰 교환."""
        data = {
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "code": code,
        }
        if code_verifier:
            data["code_verifier"] = code_verifier

        payload = await self._request("POST", self._token_url, data=data)

        access_token = payload.get("access_token")
        if not access_token:
            raise ProviderExchangeError("Missing OneID access token")

        return OidcTokens(
            access_token=access_token,
            id_token=payload.get("id_token"),
            token_type=payload.get("token_type") or "Bearer",
            expires_in=payload.get("expires_in"),
            raw=payload,
        )

    async def request_user_info(self, tokens: OidcTokens, claim: str) -> Any:
        """userinfo에서 단일 클레임 조회."""
        headers = {"Authorization": f"Bearer {tokens.access_token}"}
        payload = await self._request("GET", self._userinfo_url, headers=headers)
        return payload.get(claim)

    async def _request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        try:
            async with self._client() as client:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(f"OneID API error: {e.response.status_code}")
            raise ProviderExchangeError(f"API error: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning(f"OneID request failed: {e}")
            raise ProviderExchangeError(str(e)) from e
        except ValueError as e:
            raise ProviderExchangeError("Invalid JSON response") from e

        if not isinstance(payload, dict):
            raise ProviderExchangeError("Unexpected response payload")
        return payload
