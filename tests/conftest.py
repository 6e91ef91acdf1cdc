"""Shared fixtures: cheap primitive parameters so the unit suite stays fast."""

from __future__ import annotations

import bcrypt
import pytest

from mp_credentials.hashing import (
    Argon2Hash,
    BcryptHash,
    Blake2bHash,
    CompositeHasher,
    PolynomialRollingHash,
    Sha256Hash,
)
from mp_credentials.security.encryption import (
    AesGcmEncryptor,
    FernetEncryptor,
    RsaOaepEncryptor,
)


@pytest.fixture
def fast_argon2() -> Argon2Hash:
    return Argon2Hash(salt=b"unit-test-salt", time_cost=1, memory_cost=64)


@pytest.fixture
def fast_bcrypt() -> BcryptHash:
    return BcryptHash(salt=bcrypt.gensalt(rounds=4))


@pytest.fixture
def composite() -> CompositeHasher:
    return CompositeHasher(
        [Sha256Hash(), Blake2bHash(), PolynomialRollingHash()],
        finalizer=Sha256Hash(),
    )


@pytest.fixture
def fernet() -> FernetEncryptor:
    return FernetEncryptor([FernetEncryptor.generate_key()])


@pytest.fixture
def aesgcm() -> AesGcmEncryptor:
    return AesGcmEncryptor(AesGcmEncryptor.generate_key())


@pytest.fixture(scope="session")
def rsa_oaep() -> RsaOaepEncryptor:
    return RsaOaepEncryptor.generate()


@pytest.fixture(params=["fernet", "aesgcm", "rsa_oaep"])
def any_encryptor(request: pytest.FixtureRequest):
    return request.getfixturevalue(request.param)
