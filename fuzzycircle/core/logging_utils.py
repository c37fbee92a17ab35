"""Logging utilities for fuzzycircle.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. Library code obtains loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = 'fuzzycircle'
_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_package_root() -> logging.Logger:
    """Ensure the 'fuzzycircle' logger has a single stream handler and is
    isolated from the process root logger. Returns the 'fuzzycircle' logger.
    """
    pkg_root = logging.getLogger(ROOT_LOGGER_NAME)
    # The package __init__ only installs a NullHandler; swap it for a real one
    for h in list(pkg_root.handlers):
        if isinstance(h, logging.NullHandler):
            pkg_root.removeHandler(h)
    if not pkg_root.handlers:
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        pkg_root.addHandler(handler)
    pkg_root.propagate = False
    return pkg_root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = getattr(logging, str(level).upper(), None)
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = 'INFO') -> logging.Logger:
    """Configure the 'fuzzycircle' logger family level.

    This does NOT modify the process root logger.
    """
    pkg_root = _ensure_package_root()
    pkg_root.setLevel(_to_level(level))
    return pkg_root


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'fuzzycircle' namespace.

    Names outside the namespace are prefixed with it. Without an explicit
    level the logger is left at NOTSET so it inherits from the package root
    configured via configure_logging().
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + '.'):
        name = '{}.{}'.format(ROOT_LOGGER_NAME, name)
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging', 'ROOT_LOGGER_NAME']
