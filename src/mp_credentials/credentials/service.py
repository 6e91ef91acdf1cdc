"""Credentials – CredentialService."""
from __future__ import annotations

import hmac
from typing import NamedTuple

from mp_credentials.config.validation import InvalidConfigurationError
from mp_credentials.kernel.errors import CryptoError
from mp_credentials.kernel.security import Encryptor, HashPrimitive, SaltGenerator
from mp_credentials.observability.logging import get_logger
from mp_credentials.salt import CREDENTIAL_SALT_LENGTH

__all__ = ["CredentialService", "DerivedCredential"]

_log = get_logger(__name__)


class DerivedCredential(NamedTuple):
    """Output of :meth:`CredentialService.derive`.

    Persist both fields together; the salt cannot be recovered from the
    record.
    """

    record: str
    salt: str


class CredentialService:
    """Salt, hash and optionally encrypt passwords; verify them later.

    ``derive`` hashes ``password + salt`` (password first, no separator)
    with a fresh salt and encrypts the digest when an encryptor is
    configured.  ``verify`` reverses the encryption, recomputes the digest
    with the stored salt and compares in constant time.

    All collaborators are fixed at construction.  Swapping any of them
    would strand every record already issued, so none is exposed for
    reassignment.  Instances hold no mutable state and can be shared
    across threads.

    Usage::

        service = CredentialService(
            CompositeHasher([Sha256Hash(), Blake2bHash()], finalizer=Sha256Hash()),
            SecureSaltGenerator(),
            encryptor=FernetEncryptor([key]),
        )
        record, salt = service.derive("correct-horse")
        assert service.verify("correct-horse", salt, record)
    """

    __slots__ = ("_hasher", "_salt_generator", "_encryptor", "_salt_length")

    def __init__(
        self,
        hasher: HashPrimitive | None,
        salt_generator: SaltGenerator | None,
        encryptor: Encryptor | None = None,
        *,
        salt_length: int = CREDENTIAL_SALT_LENGTH,
    ) -> None:
        if hasher is None:
            raise InvalidConfigurationError("credential_service", "a hash primitive is required")
        if salt_generator is None:
            raise InvalidConfigurationError("credential_service", "a salt generator is required")
        if salt_length < 1:
            raise InvalidConfigurationError("credential_service", f"salt_length must be >= 1, got {salt_length}")
        self._hasher = hasher
        self._salt_generator = salt_generator
        self._encryptor = encryptor
        self._salt_length = salt_length

    @property
    def hasher(self) -> HashPrimitive:
        return self._hasher

    @property
    def encryptor(self) -> Encryptor | None:
        return self._encryptor

    @property
    def salt_length(self) -> int:
        return self._salt_length

    def derive(self, password: str) -> DerivedCredential:
        """Return a fresh ``(record, salt)`` pair for *password*."""
        salt = self._salt_generator.generate_salt(self._salt_length)
        record = self._hasher.hash(password + salt)
        if self._encryptor is not None:
            record = self._encryptor.encrypt(record)
        _log.debug(
            "credential_derived",
            algorithm=self._hasher.name,
            encrypted=self._encryptor is not None,
        )
        return DerivedCredential(record=record, salt=salt)

    def verify(self, password: str, salt: str, record: str) -> bool:
        """Return ``True`` iff *record* was derived from *password* with *salt*.

        A record the encryptor cannot open yields ``False``.  Any other
        error propagates.
        """
        if self._encryptor is not None:
            try:
                stored_hash = self._encryptor.decrypt(record)
            except CryptoError as exc:
                _log.warning("credential_record_rejected", reason=exc.code, algorithm=self._encryptor.name)
                return False
        else:
            stored_hash = record

        attempt = self._hasher.hash(password + salt)
        matched = hmac.compare_digest(
            attempt.encode("utf-8", "surrogatepass"), stored_hash.encode("utf-8", "surrogatepass")
        )
        _log.debug("credential_verified", algorithm=self._hasher.name, matched=matched)
        return matched

    def __repr__(self) -> str:
        return (
            f"CredentialService(hasher={self._hasher!r}, "
            f"encryptor={type(self._encryptor).__name__ if self._encryptor else None}, "
            f"salt_length={self._salt_length})"
        )
