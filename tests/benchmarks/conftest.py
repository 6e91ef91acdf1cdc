"""conftest.py for benchmarks.

Run with::

    pytest tests/benchmarks -o python_files="bench_*.py"

Pipelines use production-strength parameters, so timings reflect what a
login request actually pays.
"""

from __future__ import annotations

import pytest

from mp_credentials.credentials import CredentialService
from mp_credentials.hashing import (
    Argon2Hash,
    BcryptHash,
    Blake2bHash,
    CompositeHasher,
    Sha256Hash,
)
from mp_credentials.salt import SecureSaltGenerator
from mp_credentials.security.encryption import FernetEncryptor


@pytest.fixture(scope="session")
def hashlib_composite() -> CompositeHasher:
    return CompositeHasher([Sha256Hash(), Blake2bHash()], finalizer=Sha256Hash())


@pytest.fixture(scope="session")
def kdf_composite() -> CompositeHasher:
    return CompositeHasher(
        [Argon2Hash(salt=b"benchmark-salt"), BcryptHash(rounds=10), Blake2bHash()],
        finalizer=Sha256Hash(),
    )


@pytest.fixture(scope="session")
def encrypted_service(kdf_composite: CompositeHasher) -> CredentialService:
    return CredentialService(
        kdf_composite,
        SecureSaltGenerator(),
        FernetEncryptor([FernetEncryptor.generate_key()]),
    )
