"""Route protection for the HTML pages."""

import logging

from fastapi import Request
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from authdemo.services.gate import decide, redirect_target
from authdemo.services.tokens import TokenService

logger = logging.getLogger(__name__)


class AccessGateMiddleware(BaseHTTPMiddleware):
    """Redirect requests according to the access gate.

    The session cookie is verified on every request; nothing is cached.
    """

    def __init__(self, app: ASGIApp, tokens: TokenService, cookie_name: str):
        super().__init__(app)
        self.tokens = tokens
        self.cookie_name = cookie_name

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        token = request.cookies.get(self.cookie_name)
        authenticated = self.tokens.verify(token) is not None
        target = redirect_target(decide(request.url.path, authenticated))
        if target is not None:
            logger.debug(f"Redirecting {request.url.path} to {target}")
            return RedirectResponse(url=target, status_code=307)
        return await call_next(request)
