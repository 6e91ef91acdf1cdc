"""Salt – random salt generation."""
from mp_credentials.salt.generator import (
    CREDENTIAL_SALT_LENGTH,
    DEFAULT_SALT_LENGTH,
    SALT_ALPHABET,
    SecureSaltGenerator,
)

__all__ = [
    "CREDENTIAL_SALT_LENGTH",
    "DEFAULT_SALT_LENGTH",
    "SALT_ALPHABET",
    "SecureSaltGenerator",
]
