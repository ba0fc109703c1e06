"""Configuration utilities for shocktest.

This module centralizes small helpers and constants related to harness configuration.
"""

import os

from shocktest.errors import InvalidColorSettingError

COLOR_ENV_VAR = "SHOCKTEST_COLOR"  # pragma: no mutate

# POSIX exit statuses are a single byte.
MAX_EXIT_STATUS = 255

_TRUTHY = frozenset({"1", "true", "yes", "on", "always"})
_FALSY = frozenset({"0", "false", "no", "off", "never"})


def get_color_setting() -> bool | None:
    """Get the console color preference from the environment.

    Returns:
        ``True`` to force ANSI styling, ``False`` to disable it, or ``None``
        when `SHOCKTEST_COLOR` is unset or empty (let Click decide based on
        whether the stream is a terminal).

    Raises:
        InvalidColorSettingError: If `SHOCKTEST_COLOR` holds an unrecognized value.
    """
    if not (raw := os.environ.get(COLOR_ENV_VAR, "").strip()):
        return None
    value = raw.lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise InvalidColorSettingError(raw)
