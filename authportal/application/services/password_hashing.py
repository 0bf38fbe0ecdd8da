"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from authportal.domain.users.repositories import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted hashing through werkzeug; every call draws a fresh salt.

    ``check_password_hash`` compares digests with ``hmac.compare_digest``.
    """

    def __init__(self, method: str = "scrypt", salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        return str(
            generate_password_hash(password, method=self._method, salt_length=self._salt_length)
        )

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed or not password:
            return False
        try:
            return bool(check_password_hash(hashed, password))
        except ValueError:
            # unknown method or malformed hash string
            return False
