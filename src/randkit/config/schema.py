"""Pydantic v2 configuration models for randkit."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from randkit.core.base import MASK64
from randkit.generators.registry import GENERATORS

# Must list exactly the keys of GENERATORS.
Algorithm = Literal["splitmix64", "xoshiro256**", "mt19937-64", "isaac64"]

# Number of words each algorithm takes as a direct seed (None = any length).
SEED_LENGTHS: dict[str, int | None] = {
    name: None if cls.variable_seed_length else cls.seed_words
    for name, cls in GENERATORS.items()
}


class GeneratorConfig(BaseModel):
    """Which generator to build and how to seed it."""

    model_config = ConfigDict(extra="forbid")

    algorithm: Algorithm = "xoshiro256**"
    seed: int | list[int] | None = Field(
        default=None,
        description="Explicit seed; None seeds from system entropy",
    )
    seed_mode: Literal["direct", "expand"] = Field(
        default="direct",
        description="'direct' uses the seed as-is, 'expand' derives it from one word via SplitMix64",
    )

    @model_validator(mode="after")
    def _validate_seed(self) -> GeneratorConfig:
        if self.seed is None:
            return self

        words = self.seed if isinstance(self.seed, list) else [self.seed]
        for i, word in enumerate(words):
            if not 0 <= word <= MASK64:
                raise ValueError(f"seed word {i} ({word}) is not a 64-bit unsigned integer")

        if self.seed_mode == "expand":
            if len(words) != 1:
                raise ValueError("seed_mode 'expand' takes a single seed word")
            return self

        expected = SEED_LENGTHS[self.algorithm]
        if expected is not None and len(words) != expected:
            raise ValueError(
                f"{self.algorithm} takes a seed of {expected} word(s), got {len(words)}"
            )
        return self

    def seed_words(self) -> list[int] | None:
        """The seed as a list of words, or None for entropy seeding."""
        if self.seed is None:
            return None
        return list(self.seed) if isinstance(self.seed, list) else [self.seed]


class RunConfig(BaseModel):
    """A generator plus how many words to draw and how to print them."""

    model_config = ConfigDict(extra="forbid")

    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    count: int = Field(default=10, ge=1, le=10_000_000)
    skip: int = Field(default=0, ge=0, description="Words discarded before output starts")
    output_format: Literal["dec", "hex"] = "dec"
