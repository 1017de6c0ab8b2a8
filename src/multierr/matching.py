"""
Type and identity matching through composite errors and exception chains.
"""

from __future__ import annotations

from typing import Iterator, Optional, Set, Tuple, Type, TypeVar, Union

from .errors import MultiError

E = TypeVar("E", bound=BaseException)
ExceptionTypes = Union[Type[E], Tuple[Type[BaseException], ...]]


def walk(error: Optional[BaseException]) -> Iterator[BaseException]:
    """
    Yield ``error`` and every exception reachable from it, depth first.

    Composite elements and exception group members come first, in order,
    followed by ``__cause__`` or, unless suppressed, ``__context__``. Each
    exception object is yielded at most once.
    """

    seen: Set[int] = set()
    stack = [error]
    while stack:
        current = stack.pop()
        if current is None or id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        stack.append(_chained(current))
        stack.extend(reversed(_members(current)))


def _members(error: BaseException) -> Tuple[BaseException, ...]:
    if isinstance(error, MultiError):
        return error.errors
    if isinstance(error, BaseExceptionGroup):
        return tuple(error.exceptions)
    return ()


def _chained(error: BaseException) -> Optional[BaseException]:
    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    return error.__context__


def find(error: Optional[BaseException], exc_type: ExceptionTypes) -> Optional[E]:
    """
    Return the first exception in ``error``'s chain that is an instance of
    ``exc_type``, or ``None``.
    """

    for candidate in walk(error):
        if isinstance(candidate, exc_type):
            return candidate
    return None


def matches_type(error: Optional[BaseException], exc_type: ExceptionTypes) -> bool:
    return find(error, exc_type) is not None


def matches_value(error: Optional[BaseException], target: BaseException) -> bool:
    """
    Report whether ``target`` itself appears anywhere in ``error``'s chain.
    """

    return any(candidate is target for candidate in walk(error))
