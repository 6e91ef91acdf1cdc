"""Hashing – CompositeHasher."""
from __future__ import annotations

from collections.abc import Sequence

from mp_credentials.config.validation import InvalidConfigurationError
from mp_credentials.kernel.security import HashPrimitive

__all__ = ["DEFAULT_SEPARATOR", "CompositeHasher"]

DEFAULT_SEPARATOR = "|"


class CompositeHasher(HashPrimitive):
    """Combine several Hash Primitives into one digest.

    Every member hashes the same input; the member digests are joined in
    construction order with ``separator`` and the joined string is fed to
    ``finalizer``, whose output is returned.  The finaliser keeps the
    output format uniform however many members are configured.

    Member order is part of the digest: ``[a, b]`` and ``[b, a]`` produce
    different results, so records issued under one order only verify
    under that same order.  Errors raised by any member or by the
    finaliser propagate unchanged.

    Usage::

        hasher = CompositeHasher(
            [Sha256Hash(), Blake2bHash(), Argon2Hash(salt=b"app-wide-salt")],
            finalizer=Sha256Hash(),
        )
        hasher.hash("password" + salt)  # -> "sha256$..."
    """

    name = "composite"

    def __init__(
        self,
        members: Sequence[HashPrimitive],
        finalizer: HashPrimitive | None,
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        if not members:
            raise InvalidConfigurationError("composite", "at least one member primitive is required")
        if finalizer is None:
            raise InvalidConfigurationError("composite", "a finalizing primitive is required")
        if not separator:
            raise InvalidConfigurationError("composite", "separator must not be empty")
        self._members: tuple[HashPrimitive, ...] = tuple(members)
        self._finalizer = finalizer
        self._separator = separator

    @property
    def members(self) -> tuple[HashPrimitive, ...]:
        return self._members

    @property
    def finalizer(self) -> HashPrimitive:
        return self._finalizer

    def hash(self, data: str) -> str:
        combined = self._separator.join(member.hash(data) for member in self._members)
        return self._finalizer.hash(combined)

    def __repr__(self) -> str:
        names = ", ".join(m.name for m in self._members)
        return f"CompositeHasher(members=[{names}], finalizer={self._finalizer.name!r})"
