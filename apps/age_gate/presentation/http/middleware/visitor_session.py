"""Visitor Session Middleware.

방문자 세션 쿠키를 발급하고 request.state.visitor_session_id에 세션 ID를 기록합니다.
"""

from __future__ import annotations

import secrets

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SESSION_ID_MAX_LENGTH = 128
COOKIE_PATH = "/"
COOKIE_SAMESITE = "lax"


def _is_valid_session_id(value: str | None) -> bool:
    if not value or len(value) > SESSION_ID_MAX_LENGTH:
        return False
    return all(c.isalnum() or c in "-_" for c in value)


class VisitorSessionMiddleware(BaseHTTPMiddleware):
    """세션 쿠키가 없거나 형식이 잘못되면 새 세션 ID를 발급합니다."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        cookie_name: str,
        max_age: int,
        secure: bool = True,
    ) -> None:
        super().__init__(app)
        self.cookie_name = cookie_name
        self.max_age = max_age
        self.secure = secure

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        session_id = request.cookies.get(self.cookie_name)
        issued = False
        if not _is_valid_session_id(session_id):
            session_id = secrets.token_urlsafe(32)
            issued = True

        request.state.visitor_session_id = session_id
        response = await call_next(request)

        if issued:
            response.set_cookie(
                key=self.cookie_name,
                value=session_id,
                max_age=self.max_age,
                path=COOKIE_PATH,
                httponly=True,
                secure=self.secure,
                samesite=COOKIE_SAMESITE,
            )
        return response
