"""Generator capability model: the PRNG contract and the CSPRNG marker."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, TypeVar, overload

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from randkit.entropy.system import EntropySource

MASK64 = (1 << 64) - 1

G = TypeVar("G", bound="PRNG")


def rotl64(x: int, k: int) -> int:
    """Rotate a 64-bit word left by ``k`` bits, ``0 < k < 64``."""
    return ((x << k) | (x >> (64 - k))) & MASK64


class WordSource(Protocol):
    """Anything that yields 64-bit unsigned words one at a time."""

    def next_u64(self) -> int:
        """Return the next 64-bit word."""
        ...


class PRNG(ABC):
    """A deterministic generator of 64-bit unsigned words.

    Concrete generators are built either from an explicit, algorithm-specific
    seed (the constructor) or by drawing exactly ``seed_words`` words from
    another word source (:meth:`from_generator`). The latter is how one
    generator bootstraps another, and how default seeding from system
    entropy works.
    """

    #: Registry name of the algorithm.
    name: ClassVar[str]
    #: Number of words :meth:`from_generator` draws from its source.
    seed_words: ClassVar[int]
    #: Whether an explicit seed may have any length (it is normalized).
    variable_seed_length: ClassVar[bool] = False

    __slots__ = ()

    @abstractmethod
    def next_u64(self) -> int:
        """Return the next 64-bit word and advance the state."""

    @classmethod
    @abstractmethod
    def from_generator(cls: type[G], source: WordSource) -> G:
        """Construct a generator seeded by words drawn from ``source``."""

    @classmethod
    def from_entropy(cls: type[G], entropy: EntropySource | None = None) -> G:
        """Construct a generator seeded from an entropy source.

        Args:
            entropy: Source of seed words. Defaults to the operating system
                entropy pool.
        """
        if entropy is None:
            from randkit.entropy.system import SystemEntropy

            entropy = SystemEntropy()
        return cls.from_generator(entropy)

    @classmethod
    def from_u64(cls: type[G], seed: int) -> G:
        """Construct a generator whose seed is expanded from one word by SplitMix64."""
        from randkit.generators.splitmix64 import SplitMix64

        return cls.from_generator(SplitMix64(seed))

    @overload
    def random_raw(self, size: None = None) -> int: ...

    @overload
    def random_raw(self, size: int) -> NDArray[np.uint64]: ...

    def random_raw(self, size: int | None = None) -> Any:
        """Draw raw 64-bit words.

        Returns:
            A single int when ``size`` is None, otherwise an array of shape
            ``(size,)`` with dtype ``uint64``.
        """
        if size is None:
            return self.next_u64()
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        out = np.empty(size, dtype=np.uint64)
        for i in range(size):
            out[i] = self.next_u64()
        return out

    def __iter__(self) -> PRNG:
        return self

    def __next__(self) -> int:
        return self.next_u64()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CSPRNG(PRNG):
    """A PRNG intended for security-sensitive use.

    Marker class only: it adds no behaviour. The cryptographic strength is a
    property of the published algorithm, not something checked at runtime.
    """

    __slots__ = ()
