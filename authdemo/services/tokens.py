"""Signed session tokens (JWT)."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

from jose import JWTError, jwt

from authdemo.config import get_settings
from authdemo.models.user import User

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class SessionClaims:
    """Identity carried inside a session token."""

    id: int
    email: str
    name: str
    issued_at: datetime
    expires_at: datetime


class TokenService:
    """Issue and verify session tokens signed with a server-side secret.

    Verification fails closed: anything short of a well-formed, correctly
    signed, unexpired token yields ``None``.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = utcnow,
    ):
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl_seconds(self) -> int:
        return int(self._ttl.total_seconds())

    def issue(self, user_id: int, email: str, name: str) -> str:
        """Create a signed token for the given identity."""
        now = self._clock()
        expire = now + self._ttl
        to_encode = {
            "sub": str(user_id),
            "email": email,
            "name": name,
            "iat": int(now.timestamp()),
            "exp": int(expire.timestamp()),
        }
        return jwt.encode(to_encode, self._secret, algorithm=self._algorithm)

    def issue_for(self, user: User) -> str:
        return self.issue(user.id, user.email, user.name)

    def verify(self, token: str | None) -> SessionClaims | None:
        """Decode and validate a token, or return None."""
        if not token or not isinstance(token, str):
            return None
        try:
            # Expiry is checked below against the injected clock.
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JWTError:
            logger.debug("Rejected session token")
            return None

        claims = self._claims_from_payload(payload)
        if claims is None:
            logger.debug("Rejected session token")
            return None
        if self._clock() >= claims.expires_at:
            logger.debug("Rejected session token")
            return None
        return claims

    @staticmethod
    def _claims_from_payload(payload: dict[str, Any]) -> SessionClaims | None:
        sub = payload.get("sub")
        email = payload.get("email")
        name = payload.get("name")
        iat = payload.get("iat")
        exp = payload.get("exp")
        if not isinstance(sub, str) or not (sub.isascii() and sub.isdigit()):
            return None
        if not isinstance(email, str) or not isinstance(name, str):
            return None
        if not isinstance(iat, int) or not isinstance(exp, int):
            return None
        try:
            return SessionClaims(
                id=int(sub),
                email=email,
                name=name,
                issued_at=datetime.fromtimestamp(iat, UTC),
                expires_at=datetime.fromtimestamp(exp, UTC),
            )
        except (ValueError, OverflowError, OSError):
            return None


@lru_cache
def get_token_service() -> TokenService:
    """Token service configured from settings, built once per process."""
    settings = get_settings()
    return TokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(minutes=settings.session_ttl_minutes),
    )
