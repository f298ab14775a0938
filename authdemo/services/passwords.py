"""Password hashing with bcrypt."""

from passlib.context import CryptContext


class PasswordHasher:
    """Salted one-way hashing and verification of plaintext passwords.

    The work factor is fixed when the hasher is built; every digest carries
    its own salt, so two hashes of the same password never match.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self._ctx = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, plain_password: str) -> str:
        """Hash a password with a fresh salt."""
        return self._ctx.hash(plain_password)

    def verify(self, plain_password: str, password_hash: str) -> bool:
        """Verify a password against its hash.

        A malformed or unrecognised hash is a non-match, not an error.
        """
        if not plain_password or not password_hash:
            return False
        try:
            return self._ctx.verify(plain_password, password_hash)
        except (ValueError, TypeError):
            return False
