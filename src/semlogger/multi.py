"""
Fan-out dispatcher over an ordered list of semantic loggers
"""

from typing import Callable, Iterator, List, Optional

from .environment import HostEnvironment
from .errors import FatalLogError
from .levels import LogLevel
from .logger import SemanticLogger
from .payload import LogPayload
from .stack import capture_stack_trace


class MultiSemanticLogger:
    """
    Forwards each payload to every logger it holds, in insertion order.

    The dispatcher adds no locking and does not isolate failures: an
    exception raised by one logger's ``log`` reaches the caller and the
    loggers after it are not called. The logger list is meant to be fixed
    before dispatching starts; :meth:`add` must be synchronized by the
    caller if used afterwards.
    """

    def __init__(
        self,
        *loggers: SemanticLogger,
        environment: Optional[HostEnvironment] = None,
    ):
        self._loggers: List[SemanticLogger] = list(loggers)
        self.environment = environment

    def add(self, *loggers: SemanticLogger) -> "MultiSemanticLogger":
        self._loggers.extend(loggers)
        return self

    @property
    def loggers(self) -> List[SemanticLogger]:
        return list(self._loggers)

    def __iter__(self) -> Iterator[SemanticLogger]:
        return iter(self._loggers)

    def __len__(self) -> int:
        return len(self._loggers)

    def log(self, level: LogLevel, msg: str, payload: LogPayload) -> None:
        """
        Call ``log(payload)`` on each logger. Custom levels are logged
        exactly like the standard ones.
        """
        payload.set_known_fields(self.environment)
        for lgr in self._loggers:
            lgr.log(payload)

    def fatal(self, level: LogLevel, msg: str, payload: LogPayload) -> None:
        """
        Call ``log(payload)`` on each logger, then raise
        :class:`FatalLogError` once.

        The loggers' own ``fatal`` is never called: every logger sees the
        payload before the single raise.
        """
        if not payload.backtrace:
            payload.backtrace = capture_stack_trace()
        payload.set_known_fields(self.environment)
        for lgr in self._loggers:
            lgr.log(payload)
        raise FatalLogError(payload)

    def benchmark_info(
        self,
        level: LogLevel,
        msg: str,
        f: Callable[[SemanticLogger], None],
    ) -> None:
        """
        Call ``benchmark_info`` on each logger. Every logger runs and times
        ``f`` on its own, so ``f`` runs once per logger and the recorded
        durations differ slightly.
        """
        for lgr in self._loggers:
            lgr.benchmark_info(level, msg, f)
