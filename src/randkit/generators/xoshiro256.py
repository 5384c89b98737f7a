"""xoshiro256** generator."""

from __future__ import annotations

from randkit.core.base import MASK64, PRNG, WordSource, rotl64


class Xoshiro256StarStar(PRNG):
    """xoshiro256** over four 64-bit words of state.

    The all-zero state is a fixed point of the transition; callers should
    not seed with four zero words. It is not rejected.
    """

    name = "xoshiro256**"
    seed_words = 4

    __slots__ = ("_s",)

    def __init__(self, seed: tuple[int, int, int, int]) -> None:
        if len(seed) != 4:
            raise ValueError(f"xoshiro256** seed must have 4 words, got {len(seed)}")
        self._s = [int(word) & MASK64 for word in seed]

    @classmethod
    def from_generator(cls, source: WordSource) -> Xoshiro256StarStar:
        s0 = source.next_u64()
        s1 = source.next_u64()
        s2 = source.next_u64()
        s3 = source.next_u64()
        return cls((s0, s1, s2, s3))

    @property
    def state(self) -> tuple[int, int, int, int]:
        s0, s1, s2, s3 = self._s
        return (s0, s1, s2, s3)

    def next_u64(self) -> int:
        s0, s1, s2, s3 = self._s
        result = (rotl64((s1 * 5) & MASK64, 7) * 9) & MASK64
        t = (s1 << 17) & MASK64

        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3

        s2 ^= t
        s3 = rotl64(s3, 45)

        self._s = [s0, s1, s2, s3]
        return result

    def __repr__(self) -> str:
        words = ", ".join(f"{w:#018x}" for w in self._s)
        return f"Xoshiro256StarStar(state=({words}))"
