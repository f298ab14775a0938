"""SQLAlchemy models."""

from authdemo.models.user import User

__all__ = [
    "User",
]
