"""Credential store backed by the users table."""

import logging
from typing import Protocol

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from authdemo.errors import ConflictError, InternalError
from authdemo.models.user import User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Emails are case-insensitive: compare and store them lowercased."""
    return email.strip().lower()


class UserStore(Protocol):
    """Persistence for user records. Create and lookups only."""

    def create(self, email: str, password_hash: str, name: str) -> User: ...

    def find_by_email(self, email: str) -> User | None: ...

    def find_by_id(self, user_id: int) -> User | None: ...


class SqlUserStore:
    """UserStore on a SQLAlchemy session.

    Email uniqueness is enforced by the table's unique constraint, so two
    concurrent inserts of the same email end with exactly one row.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, email: str, password_hash: str, name: str) -> User:
        """Insert a new user and return it with its id and created_at."""
        user = User(email=normalize_email(email), password_hash=password_hash, name=name)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError() from None
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to insert user")
            raise InternalError() from None
        self.db.refresh(user)
        return user

    def find_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        try:
            return self.db.query(User).filter(User.email == normalize_email(email)).first()
        except SQLAlchemyError:
            logger.exception("User lookup by email failed")
            raise InternalError() from None

    def find_by_id(self, user_id: int) -> User | None:
        """Get a user by id."""
        try:
            return self.db.query(User).filter(User.id == user_id).first()
        except SQLAlchemyError:
            logger.exception("User lookup by id failed")
            raise InternalError() from None
