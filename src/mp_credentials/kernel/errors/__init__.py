"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    │       └── InvalidSaltLengthError
    ├── CryptoError              (crypto.py)
    │   ├── MalformedRecordError
    │   └── DecryptionError
    └── ConfigError              (mp_credentials.config.validation)
        ├── MissingRequiredSettingError
        ├── InvalidSettingValueError
        └── InvalidConfigurationError
"""

from mp_credentials.kernel.errors.base import BaseError
from mp_credentials.kernel.errors.crypto import (
    CryptoError,
    DecryptionError,
    MalformedRecordError,
)
from mp_credentials.kernel.errors.domain import (
    DomainError,
    InvalidSaltLengthError,
    ValidationError,
)

__all__ = [
    "BaseError",
    "CryptoError",
    "DecryptionError",
    "DomainError",
    "InvalidSaltLengthError",
    "MalformedRecordError",
    "ValidationError",
]
