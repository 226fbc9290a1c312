"""Runtime settings for the ``tidates`` command line."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from tidates.domain.model import EncodingOrder

from .env import optional_env_var
from .errors import ConfigurationError

ENCODING_ORDER_VAR: Final[str] = "TIDATES_ENCODING_ORDER"
LOG_LEVEL_VAR: Final[str] = "TIDATES_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class TidatesConfig:
    default_order: EncodingOrder = EncodingOrder.YEAR_FIRST
    log_level: int = logging.INFO


def _parse_log_level(raw: str) -> int:
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelNamesMapping().get(raw.upper())
    if level is None:
        raise ConfigurationError(f"Invalid {LOG_LEVEL_VAR}: {raw}")
    return level


def get_config() -> TidatesConfig:
    """Build the configuration from ``TIDATES_*`` environment variables."""

    defaults = TidatesConfig()

    raw_order = optional_env_var(ENCODING_ORDER_VAR)
    try:
        order = EncodingOrder.from_label(raw_order) if raw_order else defaults.default_order
    except ValueError as exc:
        raise ConfigurationError(f"Invalid {ENCODING_ORDER_VAR}: {exc}") from exc

    raw_level = optional_env_var(LOG_LEVEL_VAR)
    level = _parse_log_level(raw_level) if raw_level else defaults.log_level

    return TidatesConfig(default_order=order, log_level=level)
