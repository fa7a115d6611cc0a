"""Debug mode management for shorcut.

Debug mode has two effects. The ellipsoid method validates every iterate
and transform, and all ``shorcut`` loggers are lowered to DEBUG so the
per-iteration trace is emitted. Leaving debug mode restores the log level
that was active when it was entered.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Iterator, Optional

from ..logging import get_log_level, set_log_level

_DEBUG_ENV_VAR = "SHORCUT_DEBUG"
_TRUTHY = ("1", "true", "yes", "on")

_debug_enabled: bool = False
# Log level to restore when debug mode is switched off; None while disabled.
_saved_level: Optional[int] = None


def is_debug_enabled() -> bool:
    """
    Return whether shorcut debug mode is currently enabled.

    Debug mode can be toggled via set_debug_enabled(...), debug_context(...)
    or the SHORCUT_DEBUG environment variable read at import time.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable shorcut debug mode.

    Enabling lowers every shorcut logger to DEBUG through
    :func:`shorcut.logging.set_log_level`; disabling restores the level
    that was active before.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled, _saved_level
    enabled = bool(enabled)
    if enabled and _saved_level is None:
        _saved_level = get_log_level()
        set_log_level(logging.DEBUG)
    elif not enabled and _saved_level is not None:
        set_log_level(_saved_level)
        _saved_level = None
    _debug_enabled = enabled


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Context manager to temporarily enable or disable debug mode.

    Example
    -------
    >>> with debug_context(True):
    ...     pass
    """
    prev = _debug_enabled
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(prev)


if os.getenv(_DEBUG_ENV_VAR, "0").lower() in _TRUTHY:
    set_debug_enabled(True)
