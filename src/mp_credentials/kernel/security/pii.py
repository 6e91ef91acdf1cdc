"""Kernel security – keys whose values must never reach a log sink."""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "salt", "record", "digest", "stored_hash",
    "attempt", "encryption_key", "private_key", "token", "authorization",
})

__all__ = ["DEFAULT_SENSITIVE_FIELDS"]
