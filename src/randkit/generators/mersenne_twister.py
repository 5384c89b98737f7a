"""64-bit Mersenne Twister (MT19937-64)."""

from __future__ import annotations

from randkit.core.base import MASK64, PRNG, WordSource

# --- MT19937-64 parameters ---

W = 64  # word size in bits
N = 312  # degree of recurrence
M = 156  # middle word offset
R = 31  # bits in the lower mask

A = 0xB5026F5AA96619E9  # twist matrix coefficients

# Tempering shifts and masks
U, D = 29, 0x5555555555555555
S, B = 17, 0x71D67FFFEDA60000
T, C = 37, 0xFFF7EEE000000000
L = 43

F = 0x5851F42D4C957F2D  # initialization multiplier

LOWER_MASK = (1 << R) - 1
UPPER_MASK = ~LOWER_MASK & MASK64


class MersenneTwister64(PRNG):
    """MT19937-64 generator.

    State is a 312-word array plus an index in ``[0, 312]``. The array is
    regenerated in place ("twisted") once every 312 extractions, and each
    extracted word is tempered before it is returned.
    """

    name = "mt19937-64"
    seed_words = 1

    __slots__ = ("_mt", "_index")

    def __init__(self, seed: int) -> None:
        mt = [0] * N
        mt[0] = int(seed) & MASK64
        for i in range(1, N):
            prev = mt[i - 1]
            mt[i] = (F * (prev ^ (prev >> (W - 2))) + i) & MASK64
        self._mt = mt
        # Forces a twist on the first extraction.
        self._index = N

    @classmethod
    def from_generator(cls, source: WordSource) -> MersenneTwister64:
        return cls(source.next_u64())

    @property
    def index(self) -> int:
        return self._index

    def _twist(self) -> None:
        mt = self._mt
        for i in range(N):
            x = (mt[i] & UPPER_MASK) + (mt[(i + 1) % N] & LOWER_MASK)
            x_a = x >> 1
            if x & 1:
                x_a ^= A
            mt[i] = mt[(i + M) % N] ^ x_a
        self._index = 0

    def next_u64(self) -> int:
        if self._index >= N:
            self._twist()

        y = self._mt[self._index]
        self._index += 1

        y ^= (y >> U) & D
        y ^= (y << S) & B
        y ^= (y << T) & C
        y ^= y >> L
        return y & MASK64

    def __repr__(self) -> str:
        return f"MersenneTwister64(index={self._index})"
