"""Logging utilities for wireface.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All wireface code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_wireface_root() -> logging.Logger:
    """Ensure the 'wireface' logger has a single stream handler and is isolated
    from the process root logger. Returns the 'wireface' logger.
    """
    root = logging.getLogger('wireface')
    # Replace the package NullHandler with a real stream handler
    if not any(not isinstance(h, logging.NullHandler) for h in root.handlers):
        for h in list(root.handlers):
            root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).upper(), None)
    return value if isinstance(value, int) else default


def configure_logging(level: Union[str, int] = 'INFO', mute_external: bool = True) -> None:
    """Configure the 'wireface' logger family level and optional external noise suppression.

    This does NOT modify the process root logger.
    """
    root = _ensure_wireface_root()
    lvl = _to_level(level)
    root.setLevel(lvl)
    if mute_external and lvl <= logging.DEBUG:
        for noisy in ('matplotlib', 'matplotlib.font_manager'):
            logging.getLogger(noisy).setLevel(logging.INFO)


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'wireface' namespace.

    Without an explicit level the logger is NOTSET and inherits from the
    'wireface' parent configured via configure_logging().
    """
    _ensure_wireface_root()
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
