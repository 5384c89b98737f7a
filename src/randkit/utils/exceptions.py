"""Custom exceptions for randkit."""

from __future__ import annotations


class RandkitError(Exception):
    """Base exception for randkit."""


class ConfigError(RandkitError):
    """Invalid configuration."""


class UnknownGeneratorError(ConfigError):
    """Requested algorithm is not registered."""


class EntropyError(RandkitError):
    """Entropy source could not provide seed material."""


class EntropyExhaustedError(EntropyError):
    """A finite entropy source ran out of words."""
