"""Testing fakes – deterministic stand-ins for pipeline collaborators."""
from mp_credentials.testing.fakes.hashing import StubHash
from mp_credentials.testing.fakes.salt import FixedSaltGenerator

__all__ = ["FixedSaltGenerator", "StubHash"]
