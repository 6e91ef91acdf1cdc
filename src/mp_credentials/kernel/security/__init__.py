"""Kernel security – capability ports and sensitive log fields."""
from mp_credentials.kernel.security.crypto import Encryptor, HashPrimitive, SaltGenerator
from mp_credentials.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "Encryptor",
    "HashPrimitive",
    "SaltGenerator",
]
