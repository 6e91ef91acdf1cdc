"""Security — at-rest encryption of credential records."""
from mp_credentials.security.encryption import (
    AesGcmEncryptor,
    FernetEncryptor,
    KeyRotationService,
    RsaOaepEncryptor,
)

__all__ = [
    "AesGcmEncryptor",
    "FernetEncryptor",
    "KeyRotationService",
    "RsaOaepEncryptor",
]
