"""Application settings."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

_LOGGER = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def is_log_level(name: str) -> bool:
    """Whether *name* is a level the ``logging`` module knows, e.g. 'DEBUG'."""
    return isinstance(logging.getLevelName(name.upper()), int)


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Logging
    log_level: str = "WARNING"

    # Console
    show_banner: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Read ``ICHESS_*`` variables, keeping defaults for unset or unknown ones."""
        env = os.environ if environ is None else environ
        settings = cls()
        level = env.get("ICHESS_LOG_LEVEL")
        if level:
            if is_log_level(level):
                settings.log_level = level.upper()
            else:
                _LOGGER.warning("Ignoring unknown ICHESS_LOG_LEVEL: %r", level)
        banner = env.get("ICHESS_SHOW_BANNER")
        if banner is not None:
            settings.show_banner = banner.strip().lower() in _TRUE_VALUES
        return settings
