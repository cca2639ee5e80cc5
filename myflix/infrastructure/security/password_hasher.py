"""
Password Hasher
===============

One-way salted password hashing with bcrypt.
"""
import bcrypt

# bcrypt only uses the first 72 bytes of a secret
_BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """Hashes passwords for storage and verifies login attempts against them."""

    def __init__(self, rounds: int = 10):
        self._rounds = rounds

    @staticmethod
    def _encode(password: str) -> bytes:
        return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]

    def hash(self, password: str) -> str:
        """Return a salted bcrypt hash of `password`."""
        hashed = bcrypt.hashpw(self._encode(password), bcrypt.gensalt(rounds=self._rounds))
        return hashed.decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        """Check `password` against a stored hash. Malformed hashes never verify."""
        if not password or not hashed:
            return False
        try:
            return bcrypt.checkpw(self._encode(password), hashed.encode("utf-8"))
        except ValueError:
            return False
