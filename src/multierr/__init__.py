"""
multierr public package initialization.

Combine independent failures into one exception without losing any of
them::

    err = None
    err = combine(err, first_step())
    err = combine(err, cleanup())
"""

from .accumulate import ErrorAccumulator  # noqa: F401
from .combine import combine, count, flatten, for_each, iter_errors  # noqa: F401
from .errors import CompositeInvariantError, MultiError  # noqa: F401
from .formatting import (
    MessageStyle,
    default_format_message,
    get_message_formatter,
    make_formatter,
    message_formatter,
    set_message_formatter,
)  # noqa: F401
from .matching import find, matches_type, matches_value, walk  # noqa: F401

__all__ = [
    "MultiError",
    "CompositeInvariantError",
    "ErrorAccumulator",
    "combine",
    "for_each",
    "iter_errors",
    "count",
    "flatten",
    "find",
    "matches_type",
    "matches_value",
    "walk",
    "MessageStyle",
    "default_format_message",
    "make_formatter",
    "get_message_formatter",
    "set_message_formatter",
    "message_formatter",
]
