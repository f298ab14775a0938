"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from authdemo.api.dependencies import get_auth_service, get_current_user
from authdemo.config import Settings, get_settings
from authdemo.models.user import User
from authdemo.schemas.auth import (
    AuthResponse,
    MessageResponse,
    SessionResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from authdemo.services.auth import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


def set_session_cookie(response: Response, token: str, settings: Settings, max_age: int) -> None:
    """Store the session token in an HttpOnly cookie."""
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=max_age,
        httponly=True,
        secure=settings.secure_cookies,
        samesite=settings.cookie_samesite,
        path="/",
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/",
        httponly=True,
        secure=settings.secure_cookies,
        samesite=settings.cookie_samesite,
    )


@router.post("/sign-up", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def sign_up(
    user_data: UserRegister,
    response: Response,
    auth: Annotated[AuthService, Depends(get_auth_service)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Register a new user and start a session."""
    user = auth.register(user_data.email, user_data.password, user_data.name)
    set_session_cookie(response, auth.session_token(user), settings, auth.tokens.ttl_seconds)

    return AuthResponse(
        message="User created successfully",
        user=UserResponse.model_validate(user),
    )


@router.post("/sign-in", response_model=AuthResponse)
def sign_in(
    credentials: UserLogin,
    response: Response,
    auth: Annotated[AuthService, Depends(get_auth_service)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Login with email and password."""
    user, token = auth.login(credentials.email, credentials.password)
    set_session_cookie(response, token, settings, auth.tokens.ttl_seconds)

    return AuthResponse(
        message="Sign in successful",
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=SessionResponse)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return SessionResponse(user=UserResponse.model_validate(current_user))


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Logout by clearing the session cookie. Safe to call repeatedly."""
    clear_session_cookie(response, settings)
    return MessageResponse(message="Logged out successfully")
