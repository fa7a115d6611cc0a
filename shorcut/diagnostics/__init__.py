"""Diagnostics and debugging utilities for shorcut."""

from .core import (
    assert_finite,
    assert_in_ball,
    assert_unit_norm,
    ellipsoid_volume_factor,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_finite",
    "assert_unit_norm",
    "assert_in_ball",
    "ellipsoid_volume_factor",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
