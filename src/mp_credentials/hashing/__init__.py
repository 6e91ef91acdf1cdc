"""Hashing – Hash Primitive variants and the CompositeHasher."""
from mp_credentials.hashing.composite import DEFAULT_SEPARATOR, CompositeHasher
from mp_credentials.hashing.digests import Blake2bHash, Sha256Hash, Sha512Hash
from mp_credentials.hashing.kdf import Argon2Hash, BcryptHash, Pbkdf2Hash
from mp_credentials.hashing.polynomial import PolynomialRollingHash

__all__ = [
    "Argon2Hash",
    "BcryptHash",
    "Blake2bHash",
    "CompositeHasher",
    "DEFAULT_SEPARATOR",
    "Pbkdf2Hash",
    "PolynomialRollingHash",
    "Sha256Hash",
    "Sha512Hash",
]
