"""Credential Hasher — one-way Argon2 password hashing.

Invariants:
    - Every hash() call draws a fresh random salt; nothing salt-related is shared between calls
    - Output is the self-describing PHC string ($argon2id$v=19$m=..,t=..,p=..$salt$digest)
    - Hashing failures surface as HashFailureError, never as a raw argon2 exception
    - verify() never raises for a wrong password or an unparsable hash: it returns False
"""

import logging

from argon2 import PasswordHasher
from argon2.exceptions import HashingError, InvalidHashError, VerificationError

from app.core.errors import HashFailureError

logger = logging.getLogger(__name__)


class CredentialHasher:
    """Argon2id hasher with library-default cost parameters."""

    def __init__(self, hasher: PasswordHasher | None = None):
        self._hasher = hasher or PasswordHasher()

    def hash(self, password: str) -> str:
        try:
            return self._hasher.hash(password)
        except HashingError as e:
            logger.error(f"Password hashing failed: {e}")
            raise HashFailureError(str(e))

    def verify(self, password_hash: str, password: str) -> bool:
        try:
            return self._hasher.verify(password_hash, password)
        except (VerificationError, InvalidHashError):
            return False
