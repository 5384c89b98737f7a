"""Shared test fixtures."""

from __future__ import annotations

import pytest

from randkit.entropy.system import FixedEntropy
from randkit.generators.splitmix64 import SplitMix64


class CountingSource:
    """Word source that records how many words were drawn from it."""

    def __init__(self, seed: int = 42) -> None:
        self._inner = SplitMix64(seed)
        self.drawn = 0

    def next_u64(self) -> int:
        self.drawn += 1
        return self._inner.next_u64()


@pytest.fixture
def counting_source() -> CountingSource:
    return CountingSource()


@pytest.fixture
def fixed_entropy() -> FixedEntropy:
    """Enough deterministic entropy to seed any generator once."""
    return FixedEntropy(range(1, 257))
