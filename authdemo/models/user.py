"""User model."""

from sqlalchemy import Column, Integer, String

from authdemo.database import Base
from authdemo.models.mixins import CreatedAtMixin


class User(Base, CreatedAtMixin):
    """Registered account. Emails are stored lowercased."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
