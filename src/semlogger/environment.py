"""
Process and host facts stamped onto payloads when they are dispatched
"""

import os
import socket
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Callable


def _invocation_name() -> str:
    return sys.argv[0] if sys.argv else ""


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class HostEnvironment:
    """
    Source of the ``application``, ``pid``, ``time`` and ``host_name``
    fields. Swap any callable to make dispatch deterministic.

    An empty ``application`` falls back to the program's invocation name.
    """

    application: str = ""
    pid: Callable[[], int] = os.getpid
    hostname: Callable[[], str] = socket.gethostname
    clock: Callable[[], datetime] = _local_now

    def application_name(self) -> str:
        return self.application or _invocation_name()


_default_environment = HostEnvironment()


def default_environment() -> HostEnvironment:
    return _default_environment
