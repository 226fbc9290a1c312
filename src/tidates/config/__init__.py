"""Application configuration helpers."""

from __future__ import annotations

from tidates.common.logging import configure_logging

from .env import optional_env_var
from .errors import ConfigurationError
from .settings import ENCODING_ORDER_VAR, LOG_LEVEL_VAR, TidatesConfig, get_config

__all__ = [
    "ENCODING_ORDER_VAR",
    "LOG_LEVEL_VAR",
    "ConfigurationError",
    "TidatesConfig",
    "configure_logging",
    "get_config",
    "optional_env_var",
]
