"""Polynomial rolling hash – a non-cryptographic stand-in for tests and demos."""
from __future__ import annotations

from mp_credentials.config.validation import InvalidConfigurationError
from mp_credentials.kernel.security import HashPrimitive

__all__ = ["PolynomialRollingHash"]


class PolynomialRollingHash(HashPrimitive):
    """``h = sum(ord(c_i) * base**i) mod modulus``, rendered as ``poly$<h>``.

    Cheap and deterministic, and trivially invertible for short inputs.
    Never use it as the only member of a production pipeline.
    """

    name = "poly"

    def __init__(self, base: int = 31, modulus: int = 1_000_000_009) -> None:
        if base < 2:
            raise InvalidConfigurationError("poly", f"base must be >= 2, got {base}")
        if modulus < 2:
            raise InvalidConfigurationError("poly", f"modulus must be >= 2, got {modulus}")
        self._base = base
        self._modulus = modulus

    @property
    def base(self) -> int:
        return self._base

    @property
    def modulus(self) -> int:
        return self._modulus

    def hash(self, data: str) -> str:
        value = 0
        power = 1
        for ch in data:
            value = (value + ord(ch) * power) % self._modulus
            power = (power * self._base) % self._modulus
        return f"{self.name}${value}"
