"""Site Identity Resolver.

사이트 access token(JWT)에서 로그인 사용자 식별자를 추출합니다.
토큰이 없거나 유효하지 않으면 익명 방문자로 취급합니다 (예외 없음).
"""

from __future__ import annotations

import logging

from jose import JWTError, jwt

from apps.age_gate.domain.exceptions import InvalidIdentityError
from apps.age_gate.domain.value_objects.identity import UserIdentity

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


class JwtIdentityResolver:
    """JWT 기반 사이트 사용자 식별기."""

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str | None = None,
        audience: str | None = None,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._issuer = issuer
        self._audience = audience

    @staticmethod
    def extract_token(cookie_value: str | None, authorization: str | None) -> str | None:
        """쿠키 우선, 없으면 Authorization: Bearer 헤더."""
        if cookie_value:
            return cookie_value
        if authorization and authorization.lower().startswith(BEARER_PREFIX):
            token = authorization[len(BEARER_PREFIX) :].strip()
            return token or None
        return None

    def resolve(self, token: str | None) -> UserIdentity | None:
        if not token:
            return None
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
                options={"verify_aud": self._audience is not None},
            )
            subject = payload.get("sub")
            if not isinstance(subject, str):
                return None
            return UserIdentity(subject)
        except (JWTError, InvalidIdentityError) as e:
            logger.debug(f"Anonymous visitor: {e}")
            return None
