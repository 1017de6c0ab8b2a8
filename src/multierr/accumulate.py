"""
Accumulator for collecting failures from independent fallible steps.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator, List, Optional

from .combine import combine, count, flatten
from .utils import get_logger

logger = get_logger("accumulate")


class ErrorAccumulator:
    """
    Collects errors so later steps still run after an earlier one fails.

    Typical use in teardown code::

        errors = ErrorAccumulator()
        with errors.capture():
            connection.close()
        with errors.capture():
            tempdir.cleanup()
        errors.raise_if_any()
    """

    def __init__(self, error: Optional[BaseException] = None) -> None:
        self.error: Optional[BaseException] = error

    def add(self, error: Optional[BaseException]) -> None:
        self.error = combine(self.error, error)

    @contextmanager
    def capture(self) -> Generator[None, None, None]:
        try:
            yield
        except Exception as exc:
            logger.debug("Captured %s: %s", type(exc).__name__, exc)
            self.add(exc)

    @property
    def count(self) -> int:
        return count(self.error)

    @property
    def errors(self) -> List[BaseException]:
        return flatten(self.error)

    def __bool__(self) -> bool:
        return self.error is not None

    def raise_if_any(self) -> None:
        if self.error is not None:
            raise self.error
