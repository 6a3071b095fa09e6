"""Errors raised while loading control-plane configuration."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """A ``MESHSYNC_*`` setting is present but unusable (not a number, below its minimum)."""


class MissingConfigurationError(ConfigurationError):
    """A required ``MESHSYNC_*`` variable such as ``MESHSYNC_ENDPOINT`` is unset or blank."""
