"""Build generator instances from validated configuration."""

from __future__ import annotations

import logging

from randkit.config.schema import GeneratorConfig
from randkit.core.base import PRNG
from randkit.entropy.system import EntropySource
from randkit.generators.isaac64 import Isaac64
from randkit.generators.registry import get_generator_class
from randkit.generators.xoshiro256 import Xoshiro256StarStar

logger = logging.getLogger(__name__)


def build_generator(config: GeneratorConfig, entropy: EntropySource | None = None) -> PRNG:
    """Construct the generator described by ``config``.

    Args:
        config: Validated generator configuration.
        entropy: Entropy source for seedless configs. Defaults to the
            system source.

    Returns:
        A freshly seeded generator.
    """
    cls = get_generator_class(config.algorithm)
    words = config.seed_words()

    if words is None:
        logger.debug("Seeding %s from entropy", cls.name)
        return cls.from_entropy(entropy)

    if config.seed_mode == "expand":
        logger.debug("Seeding %s by SplitMix64 expansion of %#x", cls.name, words[0])
        return cls.from_u64(words[0])

    logger.debug("Seeding %s directly with %d word(s)", cls.name, len(words))
    if cls is Isaac64:
        return Isaac64(words)
    if cls is Xoshiro256StarStar:
        return Xoshiro256StarStar((words[0], words[1], words[2], words[3]))
    return cls(words[0])  # type: ignore[call-arg]


def draw(generator: PRNG, count: int, skip: int = 0) -> list[int]:
    """Discard ``skip`` words, then return the next ``count`` words."""
    for _ in range(skip):
        generator.next_u64()
    return [generator.next_u64() for _ in range(count)]
