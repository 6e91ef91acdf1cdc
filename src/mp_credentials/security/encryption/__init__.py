"""Security – Encryption."""
from mp_credentials.security.encryption.ciphers import (
    AesGcmEncryptor,
    FernetEncryptor,
    RsaOaepEncryptor,
)
from mp_credentials.security.encryption.key_rotation import KeyRotationService

__all__ = [
    "AesGcmEncryptor",
    "FernetEncryptor",
    "KeyRotationService",
    "RsaOaepEncryptor",
]
