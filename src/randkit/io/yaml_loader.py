"""Loader for YAML data bundled inside the randkit package."""

from __future__ import annotations

from importlib import resources
from typing import Any

import yaml

from randkit.utils.exceptions import ConfigError


def load_package_yaml(relative_path: str) -> Any:
    """Load a YAML file shipped with randkit.

    Args:
        relative_path: Path relative to the package root,
            e.g. ``"data/reference_vectors.yaml"``.

    Raises:
        ConfigError: If the file is missing or is not valid YAML.
    """
    resource = resources.files("randkit").joinpath(relative_path)
    try:
        return yaml.safe_load(resource.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigError(f"bundled data file {relative_path!r} not found") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"bundled data file {relative_path!r} is not valid YAML: {exc}") from exc
