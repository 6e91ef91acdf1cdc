"""Credentials – build a CredentialService from CredentialSettings.

Primitives and encryptors are looked up by name in two registries.  Add
an entry to :data:`HASH_FACTORIES` or :data:`ENCRYPTOR_FACTORIES` to make
a new algorithm selectable through configuration.
"""
from __future__ import annotations

from typing import Callable

from mp_credentials.config.settings import CredentialSettings
from mp_credentials.config.validation import InvalidConfigurationError
from mp_credentials.credentials.service import CredentialService
from mp_credentials.hashing import (
    Argon2Hash,
    BcryptHash,
    Blake2bHash,
    CompositeHasher,
    Pbkdf2Hash,
    PolynomialRollingHash,
    Sha256Hash,
    Sha512Hash,
)
from mp_credentials.kernel.security import Encryptor, HashPrimitive
from mp_credentials.observability.logging import get_logger
from mp_credentials.salt import SecureSaltGenerator
from mp_credentials.security.encryption import AesGcmEncryptor, FernetEncryptor, RsaOaepEncryptor

__all__ = [
    "ENCRYPTOR_FACTORIES",
    "HASH_FACTORIES",
    "build_credential_service",
    "build_encryptor",
    "build_hash_primitive",
]

_log = get_logger(__name__)


def _bcrypt(settings: CredentialSettings) -> HashPrimitive:
    if not settings.bcrypt_salt:
        raise InvalidConfigurationError(
            "bcrypt", "bcrypt_salt must be set so records verify across restarts"
        )
    return BcryptHash(salt=settings.bcrypt_salt, rounds=settings.bcrypt_rounds)


HASH_FACTORIES: dict[str, Callable[[CredentialSettings], HashPrimitive]] = {
    "sha256": lambda s: Sha256Hash(),
    "sha512": lambda s: Sha512Hash(),
    "blake2b": lambda s: Blake2bHash(),
    "poly": lambda s: PolynomialRollingHash(base=s.poly_base, modulus=s.poly_modulus),
    "argon2": lambda s: Argon2Hash(
        salt=s.argon2_salt.encode("utf-8"),
        time_cost=s.argon2_time_cost,
        memory_cost=s.argon2_memory_cost,
    ),
    "bcrypt": _bcrypt,
    "pbkdf2": lambda s: Pbkdf2Hash(salt=s.pbkdf2_salt.encode("utf-8"), iterations=s.pbkdf2_iterations),
}

ENCRYPTOR_FACTORIES: dict[str, Callable[[str], Encryptor]] = {
    "fernet": lambda key: FernetEncryptor([k.strip() for k in key.split(",") if k.strip()]),
    "aesgcm": AesGcmEncryptor.from_base64,
    "rsa": RsaOaepEncryptor.from_pem,
}


def build_hash_primitive(name: str, settings: CredentialSettings) -> HashPrimitive:
    try:
        factory = HASH_FACTORIES[name]
    except KeyError:
        raise InvalidConfigurationError(
            "hasher", f"unknown hash primitive {name!r}; expected one of {sorted(HASH_FACTORIES)}"
        ) from None
    return factory(settings)


def build_encryptor(name: str, key: str) -> Encryptor | None:
    """Return the named encryptor, or ``None`` for ``"none"``."""
    if name == "none":
        return None
    try:
        factory = ENCRYPTOR_FACTORIES[name]
    except KeyError:
        raise InvalidConfigurationError(
            "encryptor", f"unknown encryptor {name!r}; expected 'none' or one of {sorted(ENCRYPTOR_FACTORIES)}"
        ) from None
    return factory(key)


def build_credential_service(settings: CredentialSettings | None = None) -> CredentialService:
    """Assemble the composite hasher, salt generator and encryptor named in *settings*."""
    settings = settings or CredentialSettings()
    members = [build_hash_primitive(name, settings) for name in settings.hash_members]
    hasher = CompositeHasher(members, finalizer=build_hash_primitive(settings.finalizer, settings))
    encryptor = build_encryptor(settings.encryptor, settings.encryption_key)
    _log.info(
        "credential_service_built",
        members=list(settings.hash_members),
        finalizer=settings.finalizer,
        encryptor=settings.encryptor,
        salt_length=settings.salt_length,
    )
    return CredentialService(
        hasher,
        SecureSaltGenerator(),
        encryptor,
        salt_length=settings.salt_length,
    )
