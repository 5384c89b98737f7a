"""Entropy sources used for default (seedless) construction."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from typing import Protocol

import numpy as np

from randkit.utils.exceptions import EntropyError, EntropyExhaustedError

logger = logging.getLogger(__name__)


class EntropySource(Protocol):
    """Protocol for providers of raw 64-bit seed words."""

    def next_u64(self) -> int:
        """Return one 64-bit word of entropy."""
        ...

    def words(self, n: int) -> list[int]:
        """Return ``n`` words of entropy."""
        ...


class SystemEntropy:
    """Operating system CSPRNG (``os.urandom``) as a word source.

    Bytes are decoded as little-endian unsigned 64-bit words.
    """

    def next_u64(self) -> int:
        return self.words(1)[0]

    def words(self, n: int) -> list[int]:
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        try:
            raw = os.urandom(8 * n)
        except NotImplementedError as exc:
            raise EntropyError("no system entropy source available") from exc
        logger.debug("Drew %d words from system entropy", n)
        return [int(w) for w in np.frombuffer(raw, dtype="<u8")]


class FixedEntropy:
    """Replay a fixed list of words as if they were entropy.

    Useful for reproducing a default-seeded run, and for tests. Raises
    :class:`EntropyExhaustedError` once every word has been handed out.
    """

    def __init__(self, words: Iterable[int]) -> None:
        self._words = [int(w) for w in words]
        self._pos = 0

    @property
    def consumed(self) -> int:
        """Number of words handed out so far."""
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._words) - self._pos

    def next_u64(self) -> int:
        if self._pos >= len(self._words):
            raise EntropyExhaustedError(
                f"fixed entropy exhausted after {len(self._words)} words"
            )
        word = self._words[self._pos]
        self._pos += 1
        return word

    def words(self, n: int) -> list[int]:
        return [self.next_u64() for _ in range(n)]
