"""Exception types raised by stopgraph.

Both concrete errors also derive from the matching builtin so callers that
only know about ``ValueError``/``IndexError`` keep working.
"""

from __future__ import annotations


class StopGraphError(Exception):
    """Base class for all stopgraph errors."""


class InvalidArgument(StopGraphError, ValueError):
    """Raised for malformed input such as a non-positive stop count."""


class OutOfRange(StopGraphError, IndexError):
    """Raised when a stop index falls outside ``[0, vertex_count)``."""
