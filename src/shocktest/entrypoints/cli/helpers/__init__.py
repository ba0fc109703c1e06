"""CLI helpers for shocktest.

Utilities used by the command-line interface: logger-level option parsing and
a warning emitter that writes to stderr with emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import warn

__all__ = ["parse_log_level", "warn"]
