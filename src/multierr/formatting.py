"""
Message formatting for composite errors.

The formatter used by ``str(MultiError)`` is a process-wide setting looked
up at render time. It is a plain module-level binding without locking:
install a custom formatter once at startup, before other threads begin
rendering errors.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Generator, Optional, Sequence

from .utils import get_logger

MessageFormatter = Callable[[Sequence[BaseException]], str]

logger = get_logger("formatting")


@dataclass(frozen=True)
class MessageStyle:
    """
    Templates used to render a list of errors.

    ``header`` receives ``count``; ``item`` receives ``index`` (1-based) and
    ``message``. Newlines inside a message are followed by ``indent``.
    """

    header: str = "{count} errors occurred:"
    item: str = "({index}) {message}"
    indent: str = "\t"

    def __post_init__(self) -> None:
        try:
            self.header.format(count=0)
            self.item.format(index=1, message="")
        except (KeyError, IndexError, ValueError) as exc:
            raise ValueError(f"Invalid message style template: {exc!r}") from exc

    @classmethod
    def from_env(cls, prefix: str = "MULTIERR_") -> "MessageStyle":
        """
        Build a style from ``<prefix>HEADER``, ``<prefix>ITEM`` and
        ``<prefix>INDENT``, keeping defaults for unset variables.
        """

        overrides = {}
        for name in ("header", "item", "indent"):
            value = os.getenv(f"{prefix}{name.upper()}")
            if value is not None:
                overrides[name] = value
        return cls(**overrides)


DEFAULT_STYLE = MessageStyle()


def error_message(error: BaseException) -> str:
    return str(error) or type(error).__name__


def make_formatter(style: MessageStyle) -> MessageFormatter:
    def formatter(errors: Sequence[BaseException]) -> str:
        lines = [style.header.format(count=len(errors))]
        for index, error in enumerate(errors, start=1):
            message = error_message(error).replace("\n", "\n" + style.indent)
            lines.append(style.item.format(index=index, message=message))
        return "\n".join(lines)

    return formatter


def default_format_message(errors: Sequence[BaseException]) -> str:
    """
    Render errors as a counted header followed by one indexed line each::

        2 errors occurred:
        (1) first
        (2) second
    """

    return _default_formatter(errors)


_default_formatter = make_formatter(DEFAULT_STYLE)
_formatter: MessageFormatter = default_format_message


def get_message_formatter() -> MessageFormatter:
    return _formatter


def set_message_formatter(formatter: Optional[MessageFormatter]) -> MessageFormatter:
    """
    Install ``formatter`` for all composite errors and return the previous
    one. Passing ``None`` restores :func:`default_format_message`.
    """

    global _formatter
    previous = _formatter
    _formatter = formatter if formatter is not None else default_format_message
    logger.debug("Message formatter set to %r", _formatter)
    return previous


@contextmanager
def message_formatter(formatter: MessageFormatter) -> Generator[MessageFormatter, None, None]:
    previous = set_message_formatter(formatter)
    try:
        yield formatter
    finally:
        set_message_formatter(previous)


def format_message(errors: Sequence[BaseException]) -> str:
    return _formatter(errors)
