"""Config settings – CredentialSettings."""
from __future__ import annotations

import dataclasses

from mp_credentials.config.settings.base import Settings
from mp_credentials.config.validation import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class CredentialSettings(Settings):
    """Everything needed to build a :class:`CredentialService`.

    Read from ``CREDENTIALS_*`` environment variables by
    :class:`EnvSettingsLoader`.  ``hash_members`` is order-sensitive: a
    reordered list produces different digests, so it must stay fixed for
    as long as records issued under it are in use.
    """

    _prefix = "credentials"

    salt_length: int = 32
    hash_members: tuple[str, ...] = ("sha256", "blake2b", "argon2")
    finalizer: str = "sha256"
    encryptor: str = "none"
    encryption_key: str = ""
    argon2_salt: str = "mp-credentials"
    argon2_time_cost: int = 2
    argon2_memory_cost: int = 19456
    bcrypt_salt: str = ""
    bcrypt_rounds: int = 12
    pbkdf2_salt: str = "mp-credentials"
    pbkdf2_iterations: int = 600_000
    poly_base: int = 31
    poly_modulus: int = 1_000_000_009

    def _validate(self) -> None:
        if self.salt_length < 1:
            raise InvalidSettingValueError("salt_length", self.salt_length, "must be >= 1")
        if not self.hash_members:
            raise InvalidSettingValueError("hash_members", self.hash_members, "must not be empty")
        if not self.finalizer:
            raise InvalidSettingValueError("finalizer", self.finalizer, "must not be empty")
        if self.encryptor != "none" and not self.encryption_key:
            raise InvalidSettingValueError(
                "encryption_key", "", f"required when encryptor is '{self.encryptor}'"
            )
        if len(self.argon2_salt.encode()) < 8:
            raise InvalidSettingValueError("argon2_salt", "***", "must be at least 8 bytes")
        if self.argon2_time_cost < 1:
            raise InvalidSettingValueError("argon2_time_cost", self.argon2_time_cost, "must be >= 1")
        if self.argon2_memory_cost < 8:
            raise InvalidSettingValueError("argon2_memory_cost", self.argon2_memory_cost, "must be >= 8")
        if not 4 <= self.bcrypt_rounds <= 31:
            raise InvalidSettingValueError("bcrypt_rounds", self.bcrypt_rounds, "must be in 4..31")
        if self.pbkdf2_iterations < 1:
            raise InvalidSettingValueError("pbkdf2_iterations", self.pbkdf2_iterations, "must be >= 1")


__all__ = ["CredentialSettings"]
