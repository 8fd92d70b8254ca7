from __future__ import annotations

import logging
import os
from typing import Optional, Union

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_ENV_VAR = "UTOK_LOG_LEVEL"


def _resolve_level(level: Union[str, int, None]) -> int:
    if isinstance(level, int):
        return level
    name = (level or os.environ.get(_ENV_VAR) or "INFO").upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return resolved


def configure_logging(level: Union[str, int, None] = None) -> None:
    """Configure stdlib logging for the CLI.

    Falls back to the UTOK_LOG_LEVEL env var, then INFO, when `level` is None.
    Library modules only create loggers; they never configure handlers.
    """
    logging.basicConfig(level=_resolve_level(level), format=_DEFAULT_FORMAT)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or "utok")
