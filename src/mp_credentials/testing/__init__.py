"""Testing – fakes and property-based strategies for pipeline tests."""
from mp_credentials.testing.fakes import FixedSaltGenerator, StubHash

__all__ = ["FixedSaltGenerator", "StubHash"]
