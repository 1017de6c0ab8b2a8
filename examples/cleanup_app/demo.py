"""
Keeping cleanup failures alongside the failure that triggered cleanup.
"""

from __future__ import annotations

from typing import Iterable, Optional

from multierr import ErrorAccumulator, combine


class MagicUnavailable(RuntimeError):
    pass


class Dummy:
    def __init__(self, *, magic_fails: bool = True, close_fails: bool = True) -> None:
        self.magic_fails = magic_fails
        self.close_fails = close_fails
        self.closed = False

    def do_some_magic(self) -> None:
        if self.magic_fails:
            raise MagicUnavailable("magic not available")

    def close(self) -> None:
        self.closed = True
        if self.close_fails:
            raise OSError("close: whoopsie")


def sprinkle_magic_dust(dummy: Optional[Dummy] = None) -> Optional[BaseException]:
    """
    Run the magic and always close, returning every failure that happened.
    """

    dummy = dummy or Dummy()
    err: Optional[BaseException] = None
    try:
        dummy.do_some_magic()
    except MagicUnavailable as exc:
        err = exc
    finally:
        try:
            dummy.close()
        except OSError as exc:
            err = combine(err, exc)
    return err


def close_all(resources: Iterable[Dummy]) -> None:
    """
    Close every resource, then raise whatever failed.
    """

    errors = ErrorAccumulator()
    for resource in resources:
        with errors.capture():
            resource.close()
    errors.raise_if_any()


def run_demo() -> str:
    return str(sprinkle_magic_dust())


if __name__ == "__main__":
    print(run_demo())
