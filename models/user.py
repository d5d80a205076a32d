"""
models/user.py
--------------
Domain model for a user record, plus the hex codec for its identifier.
Ids are stored as 16 raw bytes and shown to clients as 32 lowercase hex chars.
"""

import string
import uuid
from dataclasses import dataclass, field

from utils.errors import MalformedInputError

ID_BYTES = 16
HEX_ID_LENGTH = ID_BYTES * 2

_HEX_DIGITS = frozenset(string.hexdigits)


def new_id() -> bytes:
    """Generate a fresh identifier from a random (version 4) UUID."""
    return uuid.uuid4().bytes


def encode_id(raw: bytes) -> str:
    """Render a raw identifier as lowercase hex."""
    return bytes(raw).hex()


def decode_id(value: str) -> bytes:
    """
    Decode a client-supplied hex id to its 16-byte form.

    Raises:
        MalformedInputError: If the value is not exactly 32 hex characters.
    """
    if len(value) != HEX_ID_LENGTH or not _HEX_DIGITS.issuperset(value):
        raise MalformedInputError(f"Invalid user id: {value!r}")
    return bytes.fromhex(value)


@dataclass
class User:
    """
    Represents a single user row.

    Attributes:
        name: Display name, stored as given.
        email: Contact address, stored as given.
        id: 16-byte identifier, generated on creation.
    """
    name: str
    email: str
    id: bytes = field(default_factory=new_id)

    @property
    def hex_id(self) -> str:
        return encode_id(self.id)

    def to_dict(self) -> dict:
        """JSON-ready representation sent to clients."""
        return {"id": self.hex_id, "name": self.name, "email": self.email}

    def __str__(self) -> str:
        return f"{self.hex_id} | {self.name} <{self.email}>"
