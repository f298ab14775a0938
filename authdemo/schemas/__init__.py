"""Pydantic schemas for API requests and responses."""

from authdemo.schemas.auth import (
    AuthResponse,
    MessageResponse,
    SessionResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "SessionResponse",
    "MessageResponse",
]
