"""
Structured log payload, matching the field layout of Ruby's semantic_logger
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from .diagnostics import ops_logger
from .environment import HostEnvironment, default_environment
from .levels import LogLevel
from .stack import capture_caller_name


@dataclass
class LogPayload:
    """
    A single log event.

    Who fills what:

    * ``level``, ``message``: the caller, through :func:`new_log_payload`
    * ``action``: :func:`new_log_payload`, from the call stack
    * ``application``, ``pid``, ``time``, ``host_name``: :meth:`set_known_fields`
    * ``tags``: the caller, through :meth:`set_tags`
    * ``name``, ``uuid``, ``table``: the sink that logs the payload
    * ``backtrace``: the fatal path
    * ``duration``: ``benchmark_info``
    * ``thread_name``: the caller, if at all
    """

    level: LogLevel
    message: str = ""
    action: str = ""
    application: str = ""
    pid: int = 0
    time: Optional[datetime] = None
    host_name: str = ""
    tags: List[str] = field(default_factory=list)
    name: str = ""
    uuid: str = ""
    table: str = ""
    backtrace: List[str] = field(default_factory=list)
    duration: Optional[timedelta] = None
    thread_name: str = ""

    @property
    def finalized(self) -> bool:
        return self.time is not None

    def set_tags(self, *tags: str) -> None:
        """Replace the tag list"""
        self.tags = list(tags)

    def set_known_fields(self, environment: Optional[HostEnvironment] = None) -> None:
        """
        Fill ``application`` (only if empty), ``pid``, ``time`` and
        ``host_name``. A hostname lookup failure leaves ``host_name`` empty
        and is reported on the operational channel.
        """
        env = environment or default_environment()
        if not self.application:
            self.application = env.application_name()
        self.pid = env.pid()
        self.time = env.clock()
        try:
            self.host_name = env.hostname()
        except Exception as exc:  # noqa: BLE001 - dispatch must not fail here
            ops_logger.warning("Error getting hostname: {}", exc)
            self.host_name = ""

    def exception(self) -> str:
        """
        Render the payload the way semantic_logger renders an exception:
        ``<message> -- panic: <message>`` followed by the backtrace.
        """
        backtrace = "\n".join(self.backtrace)
        return f"{self.message} -- panic: {self.message}\n{backtrace}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level.ordinal,
            "message": self.message,
            "action": self.action,
            "application": self.application,
            "pid": self.pid,
            "time": self.time.isoformat() if self.time else "",
            "host_name": self.host_name,
            "tags": list(self.tags),
            "name": self.name,
            "uuid": self.uuid,
            "table": self.table,
            "backtrace": list(self.backtrace),
            "duration": _nanoseconds(self.duration),
            "thread_name": self.thread_name,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)


def _nanoseconds(duration: Optional[timedelta]) -> int:
    if duration is None:
        return 0
    return (
        (duration.days * 86_400 + duration.seconds) * 1_000_000_000
        + duration.microseconds * 1_000
    )


def format_message(format_str: str, *args: Any) -> str:
    """
    ``%``-format ``format_str`` with ``args``. Never raises: a bad format
    string degrades to the format string followed by the arguments.
    """
    if not args:
        return str(format_str)
    try:
        return str(format_str) % args
    except Exception as exc:  # noqa: BLE001 - logging must not fail on bad input
        ops_logger.debug("Bad log format string {!r}: {!r}", format_str, exc)
        rendered = " ".join(_safe_repr(arg) for arg in args)
        return f"{format_str} {rendered}"


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:  # noqa: BLE001
        return "<unrepresentable>"


def new_log_payload(level: LogLevel, format_str: str, *args: Any) -> LogPayload:
    """
    Create a payload for one log event. ``action`` is the qualified name of
    the function calling this one.
    """
    return LogPayload(
        level=level,
        message=format_message(format_str, *args),
        action=capture_caller_name(1),
    )
