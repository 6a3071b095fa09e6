"""Application configuration helpers."""

from __future__ import annotations

from .control_plane import ControlPlaneConfig, get_control_plane_config
from .env import optional_env_number, optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

__all__ = [
    "ConfigurationError",
    "ControlPlaneConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "get_control_plane_config",
    "optional_env_number",
    "optional_env_var",
    "require_env_var",
    "require_env_vars",
]
