"""
Sink contract shared by every semantic logger backend
"""

import time
import uuid as _uuid
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Callable, Optional

from .environment import HostEnvironment
from .errors import FatalLogError
from .levels import LogLevel
from .payload import LogPayload
from .stack import capture_caller_name, capture_stack_trace


class SemanticLogger(ABC):
    """
    Base class for logging backends.

    ``log`` stamps the payload with this logger's ``name``, ``uuid`` and
    ``table``, fills the known fields if nobody has yet, and hands it to
    :meth:`write`. Backends implement :meth:`write` and keep their own
    I/O failures to themselves.
    """

    def __init__(
        self,
        name: str = "",
        table: str = "",
        environment: Optional[HostEnvironment] = None,
    ):
        self.name = name or type(self).__name__
        self.table = table
        self.uuid = str(_uuid.uuid4())
        self.environment = environment

    @abstractmethod
    def write(self, payload: LogPayload) -> None:
        """Deliver a stamped payload to the backend"""

    def log(self, payload: LogPayload) -> None:
        payload.name = self.name
        payload.uuid = self.uuid
        payload.table = self.table
        if not payload.finalized:
            payload.set_known_fields(self.environment)
        self.write(payload)

    def fatal(self, payload: LogPayload) -> None:
        """Log ``payload``, then raise :class:`FatalLogError` carrying it"""
        if not payload.backtrace:
            payload.backtrace = capture_stack_trace()
        self.log(payload)
        raise FatalLogError(payload)

    def benchmark_info(
        self,
        level: LogLevel,
        msg: str,
        f: Callable[["SemanticLogger"], None],
    ) -> None:
        """
        Run ``f`` with this logger as its argument and log ``msg`` at
        ``level`` with the elapsed wall-clock time as ``duration``.
        """
        action = capture_caller_name(1)
        start = time.perf_counter()
        f(self)
        elapsed = time.perf_counter() - start

        payload = LogPayload(level=level, message=msg, action=action)
        payload.duration = timedelta(seconds=elapsed)
        self.log(payload)
