"""Legacy Query Marker Middleware.

레거시 플러그인의 쿼리 마커를 새 라우트로 리다이렉트합니다.

- ?oneid-auth-start=1                → {prefix}/age-verification/start
- ?oneid-callback=1&code=...&state=... → {prefix}/age-verification/callback
"""

from __future__ import annotations

import logging
from urllib.parse import urlencode

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from apps.age_gate.setup.constants import LEGACY_CALLBACK_MARKER, LEGACY_START_MARKER

logger = logging.getLogger(__name__)


class LegacyMarkerMiddleware(BaseHTTPMiddleware):
    """레거시 마커가 있는 요청은 어떤 경로든 전용 라우트로 보냅니다."""

    def __init__(self, app: ASGIApp, *, start_path: str, callback_path: str) -> None:
        super().__init__(app)
        self.start_path = start_path
        self.callback_path = callback_path

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        params = request.query_params

        if LEGACY_START_MARKER in params:
            logger.info("Legacy start marker received", extra={"path": request.url.path})
            return RedirectResponse(url=self.start_path, status_code=302)

        if LEGACY_CALLBACK_MARKER in params:
            logger.info("Legacy callback marker received", extra={"path": request.url.path})
            forwarded = {
                key: params[key] for key in ("code", "state", "error") if key in params
            }
            url = self.callback_path
            if forwarded:
                url = f"{url}?{urlencode(forwarded)}"
            return RedirectResponse(url=url, status_code=302)

        return await call_next(request)
