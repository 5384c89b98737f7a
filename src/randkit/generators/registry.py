"""Lookup of generator classes by algorithm name."""

from __future__ import annotations

from randkit.core.base import CSPRNG, PRNG
from randkit.generators.isaac64 import Isaac64
from randkit.generators.mersenne_twister import MersenneTwister64
from randkit.generators.splitmix64 import SplitMix64
from randkit.generators.xoshiro256 import Xoshiro256StarStar
from randkit.utils.exceptions import UnknownGeneratorError

GENERATORS: dict[str, type[PRNG]] = {
    cls.name: cls for cls in (SplitMix64, Xoshiro256StarStar, MersenneTwister64, Isaac64)
}


def get_generator_class(name: str) -> type[PRNG]:
    """Return the generator class registered under ``name``.

    Raises:
        UnknownGeneratorError: If no generator has that name.
    """
    try:
        return GENERATORS[name]
    except KeyError:
        known = ", ".join(sorted(GENERATORS))
        raise UnknownGeneratorError(f"unknown algorithm {name!r} (known: {known})") from None


def is_cryptographic(name: str) -> bool:
    """Whether the named algorithm is a CSPRNG."""
    return issubclass(get_generator_class(name), CSPRNG)
