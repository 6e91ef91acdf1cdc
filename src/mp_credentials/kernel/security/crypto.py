"""Kernel security – HashPrimitive, SaltGenerator, Encryptor ports."""
from __future__ import annotations

import abc
from typing import Protocol


class HashPrimitive(abc.ABC):
    """Port: deterministic digest of a string.

    Implementations are pure: the same input and the same construction-time
    parameters always yield the same digest.  Digests are prefixed with
    ``name`` followed by ``$`` so composite outputs stay traceable.
    """

    name: str = "hash"

    @abc.abstractmethod
    def hash(self, data: str) -> str: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class SaltGenerator(abc.ABC):
    """Port: random salt of a requested length."""

    @abc.abstractmethod
    def generate_salt(self, length: int = 16) -> str: ...


class Encryptor(Protocol):
    """Reversible string transformation.

    ``decrypt(encrypt(x)) == x`` must hold for every ``x``.  ``decrypt``
    raises :class:`~mp_credentials.kernel.errors.CryptoError` on input it
    did not produce.
    """

    name: str

    def encrypt(self, data: str) -> str: ...
    def decrypt(self, data: str) -> str: ...


__all__ = ["Encryptor", "HashPrimitive", "SaltGenerator"]
