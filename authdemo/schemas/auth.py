"""Authentication schemas."""

import re

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

SPECIAL_CHARACTERS = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")
NAME_PATTERN = re.compile(r"^[a-zA-Z\s]+$")

# bcrypt only looks at the first 72 bytes
PASSWORD_MAX_LENGTH = 72


class UserRegister(BaseModel):
    """User registration request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=PASSWORD_MAX_LENGTH)
    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        if "\x00" in value:
            raise ValueError("Password must not contain NUL characters")
        if not re.search(r"[A-Z]", value):
            raise ValueError("Password must contain at least one uppercase letter")
        if not SPECIAL_CHARACTERS.search(value):
            raise ValueError("Password must contain at least one special character")
        return value

    @field_validator("name")
    @classmethod
    def name_letters_only(cls, value: str) -> str:
        if not NAME_PATTERN.match(value):
            raise ValueError("Name cannot contain numbers or special characters")
        return value


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LENGTH)


class UserResponse(BaseModel):
    """Public user fields. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str


class AuthResponse(BaseModel):
    """Sign-up / sign-in response. The session token travels in a cookie."""

    message: str
    user: UserResponse


class SessionResponse(BaseModel):
    """Current session lookup."""

    user: UserResponse


class MessageResponse(BaseModel):
    message: str
