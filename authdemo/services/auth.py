"""Registration, login and session lookup."""

import logging

from authdemo.errors import (
    AuthRequiredError,
    ConflictError,
    EmailNotFoundError,
    InvalidCredentialsError,
    InvalidPasswordError,
)
from authdemo.models.user import User
from authdemo.services.passwords import PasswordHasher
from authdemo.services.tokens import TokenService
from authdemo.services.users import UserStore

logger = logging.getLogger(__name__)


class AuthService:
    """Service for account and session operations."""

    def __init__(
        self,
        store: UserStore,
        hasher: PasswordHasher,
        tokens: TokenService,
        unify_login_errors: bool = False,
    ):
        self.store = store
        self.hasher = hasher
        self.tokens = tokens
        self.unify_login_errors = unify_login_errors

    def register(self, email: str, password: str, name: str) -> User:
        """Create a new account.

        Raises ConflictError when the email is already registered, including
        when a concurrent registration wins the race.
        """
        if self.store.find_by_email(email) is not None:
            raise ConflictError()
        user = self.store.create(email, self.hasher.hash(password), name)
        logger.info(f"Registered user {user.id} ({user.email})")
        return user

    def login(self, email: str, password: str) -> tuple[User, str]:
        """Check credentials and mint a session token.

        Unknown emails and wrong passwords raise different errors unless
        ``unify_login_errors`` is set.
        """
        user = self.store.find_by_email(email)
        if user is None:
            logger.info("Login failed: unknown email")
            if self.unify_login_errors:
                raise InvalidCredentialsError()
            raise EmailNotFoundError()

        if not self.hasher.verify(password, user.password_hash):
            logger.info(f"Login failed: wrong password for user {user.id}")
            if self.unify_login_errors:
                raise InvalidCredentialsError()
            raise InvalidPasswordError()

        logger.info(f"User {user.id} signed in")
        return user, self.session_token(user)

    def session_token(self, user: User) -> str:
        return self.tokens.issue_for(user)

    def current_user(self, token: str | None) -> User:
        """Resolve a session token to a fresh user record."""
        claims = self.tokens.verify(token)
        if claims is None:
            raise AuthRequiredError()
        user = self.store.find_by_id(claims.id)
        if user is None:
            raise AuthRequiredError()
        return user
