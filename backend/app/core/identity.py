"""Identity — UUID generation and the fixed-width 16-byte encoding used by the store.

Invariants:
    - generate() returns a random (version 4) UUID; no uniqueness check against the store
    - encode() always yields exactly 16 bytes (RFC 4122 byte order)
    - decode(encode(x)) == x; decode rejects anything that is not 16 bytes
"""

import uuid

from app.core.errors import MalformedIdentifierError

IDENTIFIER_LENGTH = 16


def generate() -> uuid.UUID:
    return uuid.uuid4()


def encode(identifier: uuid.UUID) -> bytes:
    return identifier.bytes


def decode(raw: bytes) -> uuid.UUID:
    """Rebuild a UUID from its stored bytes."""
    if len(raw) != IDENTIFIER_LENGTH:
        raise MalformedIdentifierError(len(raw))
    return uuid.UUID(bytes=bytes(raw))
