"""Serialization for run configs and drawn words."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from randkit.config.schema import RunConfig


def dump_config(config: RunConfig) -> str:
    """Serialize a run config to a JSON string."""
    return json.dumps(config.model_dump(), indent=2)


def load_config(json_str: str) -> RunConfig:
    """Deserialize a run config from a JSON string."""
    data: dict[str, Any] = json.loads(json_str)
    return RunConfig.model_validate(data)


def format_word(word: int, fmt: str = "dec") -> str:
    """Render one word as decimal or zero-padded ``0x`` hex."""
    if fmt == "hex":
        return f"{word:#018x}"
    return str(word)


def dump_words(
    algorithm: str,
    words: Sequence[int],
    fmt: str = "dec",
    skip: int = 0,
) -> str:
    """Serialize drawn words to JSON.

    Decimal words are written as JSON integers; hex words as strings.
    """
    data = {
        "algorithm": algorithm,
        "count": len(words),
        "skip": skip,
        "format": fmt,
        "words": [int(w) for w in words] if fmt == "dec" else [format_word(w, fmt) for w in words],
    }
    return json.dumps(data, indent=2)
