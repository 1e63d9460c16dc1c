"""Explicit library configuration.

Configuration is a plain dictionary handed to the functions that need it.
There is no process-wide flag state.

Keys:
    - use_degrees: bool, angle inputs are in degrees (default: False)
    - left_handed: bool, handedness-dispatching constructors pick the
      left-handed variant (default: False)
"""

import logging
from typing import Optional

from zetaml.utils.conversions import to_radians

logger = logging.getLogger(__name__)

DEFAULT_USE_DEGREES = False
DEFAULT_LEFT_HANDED = False

DEFAULT_CONFIG = {
    "use_degrees": DEFAULT_USE_DEGREES,
    "left_handed": DEFAULT_LEFT_HANDED,
}


def resolve_config(config: Optional[dict] = None) -> dict:
    """Merge a user configuration over the defaults.

    Args:
        config: Optional configuration dictionary (see module docstring)

    Returns:
        A new dictionary holding every known key
    """
    resolved = dict(DEFAULT_CONFIG)
    if config is None:
        return resolved

    for key, value in config.items():
        if key not in DEFAULT_CONFIG:
            logger.warning(f"Unknown config key {key!r}, ignoring")
            continue
        resolved[key] = bool(value)
    return resolved


def angle_to_radians(angle: float, config: Optional[dict] = None) -> float:
    """Interpret ``angle`` according to the ``use_degrees`` setting."""
    if resolve_config(config)["use_degrees"]:
        return to_radians(angle)
    return angle


def is_left_handed(config: Optional[dict] = None) -> bool:
    return resolve_config(config)["left_handed"]
