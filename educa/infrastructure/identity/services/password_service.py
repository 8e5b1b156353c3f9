"""Password hashing and verification service."""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError


class PasswordService:
    """
    Salted one-way password hashing (argon2 via pwdlib) with an optional pepper.

    The pepper is appended to the password before hashing and comes from
    configuration, never from the database.
    """

    def __init__(self, pepper: str = "") -> None:
        self.pepper = pepper
        self.password_hash = PasswordHash.recommended()
        # A real hash so timing-attack prevention in authenticate() works correctly.
        # A fake string would make pwdlib raise UnknownHashError.
        self._dummy_hash = self.password_hash.hash("dummy_password_for_timing_attack_prevention")

    def hash_password(self, plain_password: str) -> str:
        """Hash a plain password for storage with pepper."""
        return self.password_hash.hash(plain_password + self.pepper)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a plain password against a hashed password."""
        try:
            return self.password_hash.verify(plain_password + self.pepper, hashed_password)
        except UnknownHashError:
            return False

    def get_dummy_hash(self) -> str:
        """Get a dummy hash for timing attack prevention."""
        return self._dummy_hash
