"""Crypto errors — failures raised by encryptors on records they cannot open."""

from __future__ import annotations

from typing import Any

from mp_credentials.kernel.errors.base import BaseError


class CryptoError(BaseError):
    """A cryptographic primitive refused its input."""

    default_code = "crypto_error"


class MalformedRecordError(CryptoError):
    """The record does not carry the encryptor's tag or cannot be decoded.

    Raised for foreign-format input, distinct from a well-formed record
    that fails authentication.
    """

    default_code = "malformed_record"

    def __init__(self, algorithm: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Record is not a valid '{algorithm}' record: {reason}",
            detail={"algorithm": algorithm, "reason": reason},
            **kwargs,
        )
        self.algorithm = algorithm
        self.reason = reason


class DecryptionError(CryptoError):
    """A well-formed record failed authentication (wrong key or tampered)."""

    default_code = "decryption_failed"

    def __init__(self, algorithm: str, **kwargs: Any) -> None:
        super().__init__(
            f"Record could not be decrypted with the configured '{algorithm}' key",
            detail={"algorithm": algorithm},
            **kwargs,
        )
        self.algorithm = algorithm


__all__ = ["CryptoError", "DecryptionError", "MalformedRecordError"]
