"""
Fatal termination signal and the boundary that handles it
"""

from contextlib import contextmanager
from typing import Callable, Generator, Optional

from .diagnostics import ops_logger
from .payload import LogPayload


class FatalLogError(Exception):
    """
    Raised after a fatal payload has been logged. Carries the payload so a
    supervising handler can inspect level, message and backtrace.
    """

    def __init__(self, payload: LogPayload):
        super().__init__(payload.message)
        self.payload = payload

    def __str__(self) -> str:
        return self.payload.exception()


@contextmanager
def fatal_guard(
    on_fatal: Optional[Callable[[LogPayload], None]] = None, exit_code: int = 1
) -> Generator[None, None, None]:
    """
    Top-level recovery boundary for the fatal path.

    Catches :class:`FatalLogError`, hands its payload to ``on_fatal`` and
    exits with ``exit_code``. Any other exception passes through.

    Args:
        on_fatal: Optional callback receiving the fatal payload
        exit_code: Process exit status
    """
    try:
        yield
    except FatalLogError as exc:
        if on_fatal is not None:
            on_fatal(exc.payload)
        else:
            ops_logger.critical("Fatal log event: {}", exc.payload.message)
        raise SystemExit(exit_code) from exc
