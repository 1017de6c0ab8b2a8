"""
Composite exception type for multierr.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Tuple

from .formatting import error_message, format_message
from .utils import get_logger

logger = get_logger("errors")


class CompositeInvariantError(AssertionError):
    """
    Raised when a ``MultiError`` without any elements is rendered.
    """


class MultiError(Exception):
    """
    An exception holding several other exceptions in insertion order.

    Instances are normally produced by :func:`multierr.combine`, which only
    builds one when there are at least two errors to hold. Nested
    ``MultiError`` elements are expanded in place, so ``errors`` never
    contains another ``MultiError``.
    """

    def __init__(self, errors: Iterable[BaseException]) -> None:
        flattened = []
        for error in errors:
            if isinstance(error, MultiError):
                flattened.extend(error.errors)
            elif isinstance(error, BaseException):
                flattened.append(error)
            else:
                raise TypeError(f"Expected an exception object, not {error!r}")
        self.errors: Tuple[BaseException, ...] = tuple(flattened)
        super().__init__(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self.errors)

    def __str__(self) -> str:
        if not self.errors:
            logger.error("MultiError rendered with zero errors")
            raise CompositeInvariantError("MultiError does not support zero errors")
        if len(self.errors) == 1:
            return error_message(self.errors[0])
        return format_message(self.errors)

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{', '.join(repr(error) for error in self.errors)}])"

    def matches(self, predicate: Callable[[BaseException], bool]) -> BaseException | None:
        """
        Return the first error in the chain of any element satisfying
        ``predicate``, trying elements in insertion order.
        """

        from .matching import walk

        for error in self.errors:
            for candidate in walk(error):
                if predicate(candidate):
                    return candidate
        return None
