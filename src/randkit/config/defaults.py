"""Default configuration values for randkit."""

from __future__ import annotations

from randkit.config.schema import GeneratorConfig, RunConfig

DEFAULT_ALGORITHM = "xoshiro256**"
DEFAULT_COUNT = 10


def default_generator_config() -> GeneratorConfig:
    """Entropy-seeded xoshiro256**."""
    return GeneratorConfig(algorithm=DEFAULT_ALGORITHM)


def default_run_config() -> RunConfig:
    return RunConfig(generator=default_generator_config(), count=DEFAULT_COUNT)
