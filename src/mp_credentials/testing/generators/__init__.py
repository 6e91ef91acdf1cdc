"""Testing generators – Hypothesis strategies."""
from mp_credentials.testing.generators.strategies import password_strategy, salt_strategy

__all__ = ["password_strategy", "salt_strategy"]
