"""IdentityProviderClient Port.

OneID(OIDC) authorization-code 교환과 클레임 조회를 담당하는 외부 기능 인터페이스입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class OidcTokens:
    """토큰 엔드포인트 응답."""

    access_token: str
    id_token: str | None = None
    token_type: str = "Bearer"
    expires_in: int | None = None
    raw: dict[str, Any] = field(default_factory=dict)


class IdentityProviderClient(Protocol):
    """OneID 클라이언트 인터페이스.

    구현체:
        - OneIdClient (infrastructure/oidc/)
    """

    def authorization_url(self, *, state: str, code_verifier: str | None = None) -> str:
        """프로바이더 인증 URL 생성."""
        ...

    async def authenticate(self, *, code: str, code_verifier: str | None = None) -> OidcTokens:
        """인증 코드를 토큰으로 교환.

        Raises:
            ProviderExchangeError: 네트워크/프로토콜 오류
        """
        ...

    async def request_user_info(self, tokens: OidcTokens, claim: str) -> Any:
        """userinfo 엔드포인트에서 단일 클레임 조회. 클레임이 없으면 None.

        Raises:
            ProviderExchangeError: 네트워크/프로토콜 오류
        """
        ...


@dataclass(frozen=True, slots=True)
class OidcClientReady:
    """클라이언트 생성 성공."""

    client: IdentityProviderClient


@dataclass(frozen=True, slots=True)
class OidcClientUnavailable:
    """클라이언트 생성 실패 (설정 누락/오류)."""

    reason: str


OidcClientResult = OidcClientReady | OidcClientUnavailable


class IdentityProviderClientFactory(Protocol):
    """설정 기반 클라이언트 팩토리 인터페이스.

    같은 팩토리에서 get()을 여러 번 호출해도 클라이언트는 한 번만 생성됩니다.
    """

    def get(self) -> OidcClientResult:
        ...
