"""Kernel – error hierarchy and capability ports shared by every layer."""

from mp_credentials.kernel.errors import (
    BaseError,
    CryptoError,
    DecryptionError,
    DomainError,
    InvalidSaltLengthError,
    MalformedRecordError,
    ValidationError,
)
from mp_credentials.kernel.security import Encryptor, HashPrimitive, SaltGenerator

__all__ = [
    "BaseError",
    "CryptoError",
    "DecryptionError",
    "DomainError",
    "Encryptor",
    "HashPrimitive",
    "InvalidSaltLengthError",
    "MalformedRecordError",
    "SaltGenerator",
    "ValidationError",
]
