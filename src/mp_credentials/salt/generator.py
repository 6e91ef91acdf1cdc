from __future__ import annotations

import random
import secrets
import string

from mp_credentials.config.validation import InvalidConfigurationError
from mp_credentials.kernel.errors import InvalidSaltLengthError
from mp_credentials.kernel.security import SaltGenerator

__all__ = [
    "CREDENTIAL_SALT_LENGTH",
    "DEFAULT_SALT_LENGTH",
    "SALT_ALPHABET",
    "SecureSaltGenerator",
]

SALT_ALPHABET = string.ascii_letters + string.digits + "!@#$%^&*()-_=+"
DEFAULT_SALT_LENGTH = 16
CREDENTIAL_SALT_LENGTH = 32


class SecureSaltGenerator(SaltGenerator):
    """Draws salt characters uniformly from ``alphabet``.

    Each instance owns its random source.  The default is a fresh
    ``secrets.SystemRandom`` (OS CSPRNG, safe to share across threads);
    tests can pass a seeded ``random.Random`` for reproducible salts.
    """

    def __init__(self, rng: random.Random | None = None, alphabet: str = SALT_ALPHABET) -> None:
        if not alphabet:
            raise InvalidConfigurationError("salt_generator", "alphabet must not be empty")
        self._rng = rng if rng is not None else secrets.SystemRandom()
        self._alphabet = alphabet

    @property
    def alphabet(self) -> str:
        return self._alphabet

    def generate_salt(self, length: int = DEFAULT_SALT_LENGTH) -> str:
        if isinstance(length, bool) or not isinstance(length, int) or length < 0:
            raise InvalidSaltLengthError(length)
        return "".join(self._rng.choice(self._alphabet) for _ in range(length))
