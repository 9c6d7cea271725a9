"""Password hashing adapter built on werkzeug.security."""
from werkzeug.security import check_password_hash, generate_password_hash

from patterns_demo.domain.user.ports import PasswordHasherPort


class WerkzeugPasswordHasher(PasswordHasherPort):
    """Salted one-way hashes in werkzeug's ``method$salt$hash`` format."""

    def __init__(self, method: str = "scrypt", salt_length: int = 16):
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self._method, salt_length=self._salt_length)

    def verify(self, password_hash: str, password: str) -> bool:
        if not password_hash:
            return False
        return check_password_hash(password_hash, password)
