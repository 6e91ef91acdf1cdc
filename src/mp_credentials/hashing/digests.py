from __future__ import annotations

import hashlib
from typing import Any

from mp_credentials.config.validation import InvalidConfigurationError
from mp_credentials.kernel.security import HashPrimitive

__all__ = ["Blake2bHash", "Sha256Hash", "Sha512Hash"]


class _HashlibHash(HashPrimitive):
    """``<name>$<hex digest>`` over the UTF-8 encoding of the input."""

    def _new(self) -> Any:
        return hashlib.new(self.name)

    def hash(self, data: str) -> str:
        h = self._new()
        h.update(data.encode("utf-8"))
        return f"{self.name}${h.hexdigest()}"


class Sha256Hash(_HashlibHash):
    name = "sha256"


class Sha512Hash(_HashlibHash):
    name = "sha512"


class Blake2bHash(_HashlibHash):
    """BLAKE2b with a fixed digest size and optional personalisation."""

    name = "blake2b"

    def __init__(self, digest_size: int = 32, person: str = "") -> None:
        if not 1 <= digest_size <= hashlib.blake2b.MAX_DIGEST_SIZE:
            raise InvalidConfigurationError("blake2b", f"digest_size must be in 1..64, got {digest_size}")
        person_bytes = person.encode("utf-8")
        if len(person_bytes) > hashlib.blake2b.PERSON_SIZE:
            raise InvalidConfigurationError("blake2b", "person must be at most 16 bytes")
        self._digest_size = digest_size
        self._person = person_bytes

    def _new(self) -> Any:
        return hashlib.blake2b(digest_size=self._digest_size, person=self._person)
