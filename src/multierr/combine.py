"""
Combining errors and walking the errors held by a combined value.
"""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional

from .errors import MultiError

ErrorVisitor = Callable[[BaseException], None]


def combine(dest: Optional[BaseException], error: Optional[BaseException]) -> Optional[BaseException]:
    """
    Join two error values into one.

    ``None`` stands for "no error"::

        combine(None, None) is None
        combine(None, err) is err
        combine(err, None) is err
        combine(err, other) -> MultiError([err, other])

    Either argument may already be a ``MultiError``; its elements are
    spliced in rather than nested. Arguments are never modified.
    """

    if error is None:
        return dest
    if dest is None:
        return error
    if isinstance(dest, MultiError):
        return MultiError((*dest.errors, *_elements(error)))
    if isinstance(error, MultiError):
        return MultiError((dest, *error.errors))
    return MultiError((dest, error))


def _elements(error: BaseException) -> tuple[BaseException, ...]:
    if isinstance(error, MultiError):
        return error.errors
    return (error,)


def iter_errors(error: Optional[BaseException]) -> Iterator[BaseException]:
    if error is None:
        return
    yield from _elements(error)


def for_each(error: Optional[BaseException], visit: ErrorVisitor) -> None:
    """
    Call ``visit`` with each error held by ``error``, in order.

    A plain exception is visited once; ``None`` is not visited at all.
    """

    for item in iter_errors(error):
        visit(item)


def count(error: Optional[BaseException]) -> int:
    if error is None:
        return 0
    return len(_elements(error))


def flatten(error: Optional[BaseException]) -> List[BaseException]:
    return list(iter_errors(error))
