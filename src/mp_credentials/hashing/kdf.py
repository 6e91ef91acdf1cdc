"""Hashing – password-hashing KDFs with construction-time parameters.

The per-credential randomness is the salt the service appends to the
password before hashing, so the KDF salts here are fixed at construction.
That keeps every primitive a pure function of its input, which the
composite needs in order to reproduce a digest at verification time.
"""
from __future__ import annotations

import base64
import hashlib

import bcrypt
from argon2.low_level import Type, hash_secret_raw

from mp_credentials.config.validation import InvalidConfigurationError
from mp_credentials.kernel.security import HashPrimitive

__all__ = ["Argon2Hash", "BcryptHash", "Pbkdf2Hash"]

_MIN_KDF_SALT_LEN = 8


class Argon2Hash(HashPrimitive):
    """Argon2id raw hash rendered as ``argon2$<hex>``.

    Defaults follow the OWASP minimum for Argon2id (19 MiB, t=2, p=1).
    """

    name = "argon2"

    def __init__(
        self,
        salt: bytes,
        time_cost: int = 2,
        memory_cost: int = 19456,
        parallelism: int = 1,
        hash_len: int = 32,
    ) -> None:
        if len(salt) < _MIN_KDF_SALT_LEN:
            raise InvalidConfigurationError("argon2", f"salt must be at least {_MIN_KDF_SALT_LEN} bytes")
        if time_cost < 1:
            raise InvalidConfigurationError("argon2", "time_cost must be >= 1")
        if parallelism < 1:
            raise InvalidConfigurationError("argon2", "parallelism must be >= 1")
        if hash_len < 4:
            raise InvalidConfigurationError("argon2", "hash_len must be >= 4")
        if memory_cost < 8 * parallelism:
            raise InvalidConfigurationError("argon2", "memory_cost must be >= 8 * parallelism")
        self._salt = salt
        self._time_cost = time_cost
        self._memory_cost = memory_cost
        self._parallelism = parallelism
        self._hash_len = hash_len

    def hash(self, data: str) -> str:
        raw = hash_secret_raw(
            secret=data.encode("utf-8"),
            salt=self._salt,
            time_cost=self._time_cost,
            memory_cost=self._memory_cost,
            parallelism=self._parallelism,
            hash_len=self._hash_len,
            type=Type.ID,
        )
        return f"{self.name}${raw.hex()}"


class BcryptHash(HashPrimitive):
    """bcrypt with a fixed bcrypt salt, rendered as ``bcrypt$<modular crypt string>``.

    The input is pre-hashed with SHA-256 and base64-encoded (44 bytes) so
    bcrypt's 72-byte input limit never truncates or rejects a password.
    When *salt* is omitted one is generated; persist :attr:`salt` or
    records become unverifiable after a restart.
    """

    name = "bcrypt"

    def __init__(self, salt: bytes | str | None = None, rounds: int = 12) -> None:
        if salt is None:
            salt = bcrypt.gensalt(rounds=rounds)
        self._salt = salt if isinstance(salt, bytes) else salt.encode("ascii")
        try:
            bcrypt.hashpw(b"", self._salt)
        except ValueError as exc:
            raise InvalidConfigurationError("bcrypt", "salt is not a valid bcrypt salt") from exc

    @property
    def salt(self) -> bytes:
        return self._salt

    def hash(self, data: str) -> str:
        prehashed = base64.b64encode(hashlib.sha256(data.encode("utf-8")).digest())
        return f"{self.name}${bcrypt.hashpw(prehashed, self._salt).decode('ascii')}"


class Pbkdf2Hash(HashPrimitive):
    """PBKDF2-HMAC rendered as ``pbkdf2-<alg>$<iterations>$<hex>``."""

    def __init__(self, salt: bytes, iterations: int = 600_000, algorithm: str = "sha256") -> None:
        if len(salt) < _MIN_KDF_SALT_LEN:
            raise InvalidConfigurationError("pbkdf2", f"salt must be at least {_MIN_KDF_SALT_LEN} bytes")
        if iterations < 1:
            raise InvalidConfigurationError("pbkdf2", "iterations must be >= 1")
        try:
            hashlib.pbkdf2_hmac(algorithm, b"", salt, 1)
        except ValueError as exc:
            raise InvalidConfigurationError(
                "pbkdf2", f"digest algorithm {algorithm!r} is not usable with HMAC"
            ) from exc
        self.name = f"pbkdf2-{algorithm}"
        self._salt = salt
        self._iterations = iterations
        self._algorithm = algorithm

    def hash(self, data: str) -> str:
        raw = hashlib.pbkdf2_hmac(self._algorithm, data.encode("utf-8"), self._salt, self._iterations)
        return f"{self.name}${self._iterations}${raw.hex()}"
