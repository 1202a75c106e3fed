"""Visitor Context Dependency.

요청마다 세션 ID와 (선택적) 로그인 사용자 식별자를 명시적으로 전달합니다.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Depends, Header, Request

from apps.age_gate.domain.value_objects.identity import UserIdentity
from apps.age_gate.infrastructure.security import JwtIdentityResolver
from apps.age_gate.setup.config import Settings, get_settings
from apps.age_gate.setup.dependencies import get_identity_resolver


@dataclass(frozen=True, slots=True)
class VisitorContext:
    """현재 요청의 방문자."""

    session_id: str
    identity: UserIdentity | None = None


def get_visitor_session_id(request: Request) -> str:
    """VisitorSessionMiddleware가 기록한 세션 ID."""
    session_id = getattr(request.state, "visitor_session_id", None)
    if not session_id:
        raise RuntimeError("VisitorSessionMiddleware is not installed")
    return session_id


def get_visitor_context(
    request: Request,
    authorization: str | None = Header(None),
    session_id: str = Depends(get_visitor_session_id),
    settings: Settings = Depends(get_settings),
    identity_resolver: JwtIdentityResolver = Depends(get_identity_resolver),
) -> VisitorContext:
    """세션 ID + 사이트 access token의 사용자 식별자.

    토큰이 없거나 유효하지 않으면 익명 방문자입니다.
    """
    token = identity_resolver.extract_token(
        request.cookies.get(settings.access_cookie_name), authorization
    )
    return VisitorContext(session_id=session_id, identity=identity_resolver.resolve(token))
