"""Root logger setup for the dashboard process.

``main()`` calls :func:`configure_logging` once, after settings and CLI flags
are resolved. ``LEDGERDASH_LOG_LEVEL`` always wins over the debug flag.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
ENV_LOG_LEVEL = "LEDGERDASH_LOG_LEVEL"

# Connection-pool chatter from requests, only shown when debugging.
_NOISY_LOGGERS = ("urllib3",)


def parse_level(value: Optional[str]) -> Optional[int]:
    """Turn ``"debug"``, ``"WARNING"`` or ``"10"`` into a level, else ``None``."""
    text = (value or "").strip()
    if not text:
        return None
    if text.isdigit():
        return int(text)
    candidate = logging.getLevelName(text.upper())
    return candidate if isinstance(candidate, int) else None


def resolve_level(debug: bool = False, environ: Optional[Mapping[str, str]] = None) -> int:
    env = os.environ if environ is None else environ
    explicit = parse_level(env.get(ENV_LOG_LEVEL))
    if explicit is not None:
        return explicit
    return logging.DEBUG if debug else logging.INFO


def configure_logging(debug: bool = False, environ: Optional[Mapping[str, str]] = None) -> int:
    """Install the compact format on the root logger and return its level."""
    level = resolve_level(debug, environ)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if level <= logging.DEBUG else logging.WARNING)
    return level


__all__ = ["ENV_LOG_LEVEL", "configure_logging", "parse_level", "resolve_level"]
