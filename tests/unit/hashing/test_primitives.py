"""Unit tests for Hash Primitive variants."""

from __future__ import annotations

import bcrypt
import pytest
from hypothesis import given

from mp_credentials.config.validation import InvalidConfigurationError
from mp_credentials.hashing import (
    Argon2Hash,
    BcryptHash,
    Blake2bHash,
    Pbkdf2Hash,
    PolynomialRollingHash,
    Sha256Hash,
    Sha512Hash,
)
from mp_credentials.kernel.security import HashPrimitive
from mp_credentials.testing.generators import password_strategy, salt_strategy


class TestHashlibDigests:
    def test_sha256_known_vector(self) -> None:
        assert Sha256Hash().hash("abc") == (
            "sha256$ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_sha256_empty_input(self) -> None:
        assert Sha256Hash().hash("") == (
            "sha256$e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )

    def test_sha512_tag_and_length(self) -> None:
        digest = Sha512Hash().hash("abc")
        tag, hexdigest = digest.split("$")
        assert tag == "sha512"
        assert len(hexdigest) == 128

    def test_blake2b_digest_size(self) -> None:
        digest = Blake2bHash(digest_size=16).hash("abc")
        assert digest.startswith("blake2b$")
        assert len(digest.split("$")[1]) == 32

    def test_blake2b_person_changes_digest(self) -> None:
        assert Blake2bHash(person="app-a").hash("x") != Blake2bHash(person="app-b").hash("x")

    @pytest.mark.parametrize("size", [0, 65])
    def test_blake2b_rejects_bad_digest_size(self, size: int) -> None:
        with pytest.raises(InvalidConfigurationError):
            Blake2bHash(digest_size=size)

    def test_blake2b_rejects_long_person(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            Blake2bHash(person="p" * 17)

    def test_unicode_input(self) -> None:
        assert Sha256Hash().hash("pässwörd") != Sha256Hash().hash("passwore")


class TestPolynomialRollingHash:
    def test_known_values(self) -> None:
        h = PolynomialRollingHash(base=31, modulus=1_000_000_009)
        assert h.hash("") == "poly$0"
        assert h.hash("a") == "poly$97"
        assert h.hash("abc") == "poly$98274"

    def test_modulus_bounds_output(self) -> None:
        h = PolynomialRollingHash(base=31, modulus=101)
        value = int(h.hash("a much longer input string").split("$")[1])
        assert 0 <= value < 101

    def test_parameters_change_digest(self) -> None:
        assert PolynomialRollingHash(base=31).hash("abc") != PolynomialRollingHash(base=37).hash("abc")

    def test_exposes_parameters(self) -> None:
        h = PolynomialRollingHash(base=53, modulus=997)
        assert (h.base, h.modulus) == (53, 997)

    @pytest.mark.parametrize("base,modulus", [(1, 97), (31, 1), (0, 0)])
    def test_rejects_degenerate_parameters(self, base: int, modulus: int) -> None:
        with pytest.raises(InvalidConfigurationError):
            PolynomialRollingHash(base=base, modulus=modulus)


class TestArgon2Hash:
    def test_deterministic(self, fast_argon2: Argon2Hash) -> None:
        assert fast_argon2.hash("pw+salt") == fast_argon2.hash("pw+salt")

    def test_format(self, fast_argon2: Argon2Hash) -> None:
        tag, hexdigest = fast_argon2.hash("x").split("$")
        assert tag == "argon2"
        assert len(hexdigest) == 64

    def test_kdf_salt_changes_digest(self) -> None:
        a = Argon2Hash(salt=b"salt-one", time_cost=1, memory_cost=64)
        b = Argon2Hash(salt=b"salt-two", time_cost=1, memory_cost=64)
        assert a.hash("x") != b.hash("x")

    def test_rejects_short_salt(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            Argon2Hash(salt=b"short")

    def test_rejects_memory_below_parallelism_floor(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            Argon2Hash(salt=b"long-enough", memory_cost=8, parallelism=2)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"time_cost": 0},
            {"time_cost": -1},
            {"parallelism": 0},
            {"hash_len": 3},
        ],
    )
    def test_rejects_degenerate_cost_parameters(self, kwargs: dict) -> None:
        with pytest.raises(InvalidConfigurationError) as exc_info:
            Argon2Hash(salt=b"long-enough", memory_cost=64, **kwargs)
        assert exc_info.value.component == "argon2"


class TestBcryptHash:
    def test_deterministic_with_fixed_salt(self, fast_bcrypt: BcryptHash) -> None:
        assert fast_bcrypt.hash("pw") == fast_bcrypt.hash("pw")

    def test_format(self, fast_bcrypt: BcryptHash) -> None:
        digest = fast_bcrypt.hash("pw")
        assert digest.startswith("bcrypt$$2b$04$")

    def test_generated_salt_is_exposed(self) -> None:
        h = BcryptHash(rounds=4)
        assert h.salt.startswith(b"$2b$04$")
        assert BcryptHash(salt=h.salt).hash("pw") == h.hash("pw")

    def test_accepts_str_salt(self) -> None:
        salt = bcrypt.gensalt(rounds=4)
        assert BcryptHash(salt=salt.decode()).hash("pw") == BcryptHash(salt=salt).hash("pw")

    def test_long_input_is_not_truncated(self, fast_bcrypt: BcryptHash) -> None:
        base = "x" * 100
        assert fast_bcrypt.hash(base + "a") != fast_bcrypt.hash(base + "b")

    def test_rejects_invalid_salt(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            BcryptHash(salt=b"not-a-bcrypt-salt")


class TestPbkdf2Hash:
    def test_format(self) -> None:
        digest = Pbkdf2Hash(salt=b"fixed-salt", iterations=10).hash("pw")
        name, iterations, hexdigest = digest.split("$")
        assert name == "pbkdf2-sha256"
        assert iterations == "10"
        assert len(hexdigest) == 64

    def test_algorithm_in_name(self) -> None:
        h = Pbkdf2Hash(salt=b"fixed-salt", iterations=10, algorithm="sha512")
        assert h.name == "pbkdf2-sha512"
        assert h.hash("pw").startswith("pbkdf2-sha512$10$")

    def test_iterations_change_digest(self) -> None:
        a = Pbkdf2Hash(salt=b"fixed-salt", iterations=10).hash("pw")
        b = Pbkdf2Hash(salt=b"fixed-salt", iterations=11).hash("pw")
        assert a.split("$")[2] != b.split("$")[2]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"salt": b"short"},
            {"salt": b"fixed-salt", "iterations": 0},
            {"salt": b"fixed-salt", "algorithm": "no-such-digest"},
            {"salt": b"fixed-salt", "algorithm": "shake_128"},
            {"salt": b"fixed-salt", "algorithm": "shake_256"},
        ],
    )
    def test_rejects_bad_parameters(self, kwargs: dict) -> None:
        with pytest.raises(InvalidConfigurationError):
            Pbkdf2Hash(**kwargs)


class TestDeterminism:
    @pytest.mark.parametrize(
        "primitive",
        [Sha256Hash(), Sha512Hash(), Blake2bHash(), PolynomialRollingHash()],
        ids=lambda p: p.name,
    )
    @given(password=password_strategy(), salt=salt_strategy())
    def test_same_input_same_digest(self, primitive: HashPrimitive, password: str, salt: str) -> None:
        assert primitive.hash(password + salt) == primitive.hash(password + salt)

    def test_digests_never_contain_composite_separator(
        self, fast_argon2: Argon2Hash, fast_bcrypt: BcryptHash
    ) -> None:
        primitives: list[HashPrimitive] = [
            Sha256Hash(),
            Sha512Hash(),
            Blake2bHash(),
            PolynomialRollingHash(),
            Pbkdf2Hash(salt=b"fixed-salt", iterations=10),
            fast_argon2,
            fast_bcrypt,
        ]
        for primitive in primitives:
            assert "|" not in primitive.hash("a|b|c")
