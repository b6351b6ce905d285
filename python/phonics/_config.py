"""Runtime configuration for the batch layer.

Settings are read lazily from the environment and can be overridden at
runtime:

- ``PHONICS_CHECK_INTERVAL``: number of items between batch checkpoints
  (progress callbacks and cancellation checks). Defaults to 10000.
"""

import os
from typing import Optional

from phonics.exceptions import ValidationError

DEFAULT_CHECK_INTERVAL = 10_000
CHECK_INTERVAL_ENV = "PHONICS_CHECK_INTERVAL"


class _ConfigState:
    """Encapsulates configuration state to avoid global variables."""

    check_interval: Optional[int] = None


_state = _ConfigState()


def _parse_interval(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(
            f"{CHECK_INTERVAL_ENV} must be a positive integer, got {raw!r}"
        ) from None
    if value <= 0:
        raise ValidationError(f"{CHECK_INTERVAL_ENV} must be a positive integer, got {raw!r}")
    return value


def get_check_interval() -> int:
    """Return the number of items between batch checkpoints.

    An explicit :func:`set_check_interval` wins over the environment.
    """
    if _state.check_interval is not None:
        return _state.check_interval

    raw = os.environ.get(CHECK_INTERVAL_ENV, "").strip()
    if not raw:
        return DEFAULT_CHECK_INTERVAL
    return _parse_interval(raw)


def set_check_interval(interval: Optional[int]) -> None:
    """Override the checkpoint interval at runtime.

    Args:
        interval: Positive number of items, or None to go back to the
            environment / default value.

    Example:
        >>> import phonics
        >>> phonics.set_check_interval(500)
        >>> phonics.set_check_interval(None)  # back to the default
    """
    if interval is None:
        _state.check_interval = None
        return
    if isinstance(interval, bool) or not isinstance(interval, int) or interval <= 0:
        raise ValidationError(f"check interval must be a positive int, got {interval!r}")
    _state.check_interval = interval
