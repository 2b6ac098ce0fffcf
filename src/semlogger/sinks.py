"""
In-process semantic logger backends
"""

from typing import List, Optional

from loguru import logger as _logger

from .diagnostics import ops_logger
from .environment import HostEnvironment
from .logger import SemanticLogger
from .payload import LogPayload


class LoguruLogger(SemanticLogger):
    """
    Writes payloads through loguru, so they reach whatever console or file
    handlers loguru has been configured with. The payload is bound as
    ``extra[payload]`` and the logger name as ``extra[tag]``.
    """

    def __init__(
        self,
        logger=None,
        name: str = "",
        table: str = "",
        environment: Optional[HostEnvironment] = None,
    ):
        super().__init__(name=name, table=table, environment=environment)
        self._logger = logger if logger is not None else _logger

    def write(self, payload: LogPayload) -> None:
        try:
            bound = self._logger.bind(tag=payload.name, payload=payload.to_dict())
            bound.log(payload.level.to_loguru(), payload.message)
        except Exception as exc:  # noqa: BLE001 - backend errors stay in the backend
            ops_logger.warning("Failed to write payload through loguru: {}", exc)


class MemoryLogger(SemanticLogger):
    """Keeps every payload it receives, in order"""

    def __init__(
        self,
        name: str = "",
        table: str = "",
        environment: Optional[HostEnvironment] = None,
    ):
        super().__init__(name=name, table=table, environment=environment)
        self.payloads: List[LogPayload] = []

    def write(self, payload: LogPayload) -> None:
        self.payloads.append(payload)

    def clear(self) -> None:
        self.payloads.clear()


class NullLogger(SemanticLogger):
    """Discards every payload"""

    def write(self, payload: LogPayload) -> None:
        pass
