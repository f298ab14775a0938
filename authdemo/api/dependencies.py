"""FastAPI dependencies for authentication and database."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from authdemo.config import Settings, get_settings
from authdemo.database import get_db
from authdemo.models.user import User
from authdemo.services.auth import AuthService
from authdemo.services.passwords import PasswordHasher
from authdemo.services.tokens import TokenService, get_token_service
from authdemo.services.users import SqlUserStore, UserStore


def get_user_store(
    db: Annotated[Session, Depends(get_db)],
) -> UserStore:
    """Get the credential store for this request."""
    return SqlUserStore(db)


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Get the process-wide password hasher."""
    return PasswordHasher(rounds=get_settings().bcrypt_rounds)


def get_auth_service(
    store: Annotated[UserStore, Depends(get_user_store)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(store, hasher, tokens, unify_login_errors=settings.unify_login_errors)


def get_session_token(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> str | None:
    """Read the session token from its cookie, if any."""
    return request.cookies.get(settings.session_cookie_name)


def get_current_user(
    token: Annotated[str | None, Depends(get_session_token)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    """Get the current authenticated user from the session cookie."""
    return auth.current_user(token)
