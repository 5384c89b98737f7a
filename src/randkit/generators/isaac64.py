"""ISAAC-64 cryptographically-intended generator."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from randkit.core.base import CSPRNG, MASK64, WordSource

logger = logging.getLogger(__name__)

RANDSIZ = 256
GOLDEN_RATIO = 0x9E3779B97F4A7C13


def normalize_seed(seed: Sequence[int]) -> list[int]:
    """Pad with zeros or truncate a seed to exactly 256 words.

    Excess words are dropped from the tail. Mismatched lengths are never an
    error.
    """
    words = [int(word) & MASK64 for word in seed[:RANDSIZ]]
    if len(seed) > RANDSIZ:
        logger.debug("ISAAC-64 seed truncated from %d to %d words", len(seed), RANDSIZ)
    elif len(seed) < RANDSIZ:
        logger.debug("ISAAC-64 seed zero-padded from %d to %d words", len(seed), RANDSIZ)
        words.extend([0] * (RANDSIZ - len(words)))
    return words


def _mix(s: list[int]) -> None:
    """Run the 8-word xor/add cascade on ``s`` in place."""
    s[0] ^= (s[1] << 11) & MASK64
    s[3] = (s[3] + s[0]) & MASK64
    s[1] = (s[1] + s[2]) & MASK64
    s[1] ^= s[2] >> 2
    s[4] = (s[4] + s[1]) & MASK64
    s[2] = (s[2] + s[3]) & MASK64
    s[2] ^= (s[3] << 8) & MASK64
    s[5] = (s[5] + s[2]) & MASK64
    s[3] = (s[3] + s[4]) & MASK64
    s[3] ^= s[4] >> 16
    s[6] = (s[6] + s[3]) & MASK64
    s[4] = (s[4] + s[5]) & MASK64
    s[4] ^= (s[5] << 10) & MASK64
    s[7] = (s[7] + s[4]) & MASK64
    s[5] = (s[5] + s[6]) & MASK64
    s[5] ^= s[6] >> 4
    s[0] = (s[0] + s[5]) & MASK64
    s[6] = (s[6] + s[7]) & MASK64
    s[6] ^= (s[7] << 8) & MASK64
    s[1] = (s[1] + s[6]) & MASK64
    s[7] = (s[7] + s[0]) & MASK64
    s[7] ^= s[0] >> 9
    s[2] = (s[2] + s[7]) & MASK64
    s[0] = (s[0] + s[1]) & MASK64


class Isaac64(CSPRNG):
    """ISAAC-64 generator.

    Internal memory ``mm`` (256 words) is initialized from the seed with two
    full mixing passes. Outputs are produced in batches of 256 by
    :meth:`_generate` and consumed front to back.
    """

    name = "isaac64"
    seed_words = RANDSIZ
    variable_seed_length = True

    __slots__ = ("_mm", "_result", "_aa", "_bb", "_cc", "_count")

    def __init__(self, seed: Sequence[int]) -> None:
        words = normalize_seed(seed)

        self._aa = 0
        self._bb = 0
        self._cc = 0

        state = [GOLDEN_RATIO] * 8
        for _ in range(4):
            _mix(state)

        mm: list[int] = []
        for i in range(0, RANDSIZ, 8):
            for j in range(8):
                state[j] = (state[j] + words[i + j]) & MASK64
            _mix(state)
            mm.extend(state)

        # Second pass spreads every seed word across the whole of mm.
        for i in range(0, RANDSIZ, 8):
            for j in range(8):
                state[j] = (state[j] + mm[i + j]) & MASK64
            _mix(state)
            mm[i : i + 8] = state

        self._mm = mm
        self._result = [0] * RANDSIZ
        self._count = RANDSIZ

    @classmethod
    def from_generator(cls, source: WordSource) -> Isaac64:
        return cls([source.next_u64() for _ in range(RANDSIZ)])

    @property
    def count(self) -> int:
        """Number of words consumed from the current output batch."""
        return self._count

    def _generate(self) -> None:
        mm = self._mm
        result = self._result
        aa = self._aa
        self._cc = (self._cc + 1) & MASK64
        bb = (self._bb + self._cc) & MASK64

        for i in range(RANDSIZ):
            x = mm[i]
            step = i & 3
            if step == 0:
                aa ^= (aa << 13) & MASK64
            elif step == 1:
                aa ^= aa >> 6
            elif step == 2:
                aa ^= (aa << 2) & MASK64
            else:
                aa ^= aa >> 16
            aa = (mm[i ^ 128] + aa) & MASK64
            y = (mm[(x >> 2) & 0xFF] + aa + bb) & MASK64
            mm[i] = y
            bb = (mm[(y >> 10) & 0xFF] + x) & MASK64
            result[i] = bb

        self._aa = aa
        self._bb = bb
        self._count = 0

    def next_u64(self) -> int:
        if self._count == RANDSIZ:
            self._generate()
        value = self._result[self._count]
        self._count += 1
        return value

    def __repr__(self) -> str:
        return f"Isaac64(count={self._count})"
