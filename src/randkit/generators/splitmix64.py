"""SplitMix64: a tiny, fast generator and the standard seed expander."""

from __future__ import annotations

from randkit.core.base import MASK64, PRNG, WordSource

GOLDEN_GAMMA = 0x9E3779B97F4A7C15


class SplitMix64(PRNG):
    """SplitMix64 generator.

    The state only accumulates the golden-ratio increment; each output is a
    mixed copy of the updated state.
    """

    name = "splitmix64"
    seed_words = 1

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        self._state = int(seed) & MASK64

    @classmethod
    def from_generator(cls, source: WordSource) -> SplitMix64:
        return cls(source.next_u64())

    @property
    def state(self) -> int:
        return self._state

    def next_u64(self) -> int:
        self._state = (self._state + GOLDEN_GAMMA) & MASK64
        z = self._state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
        return z ^ (z >> 31)

    def __repr__(self) -> str:
        return f"SplitMix64(state={self._state:#018x})"


def expand_seed(seed: int, n: int) -> list[int]:
    """Expand one 64-bit seed into ``n`` words of seed material.

    Args:
        seed: The 64-bit input value.
        n: Number of words to produce.

    Returns:
        The first ``n`` outputs of a SplitMix64 seeded with ``seed``.
    """
    sm = SplitMix64(seed)
    return [sm.next_u64() for _ in range(n)]
