"""
Semantic Logger Package

Structured log payloads in the layout of Ruby's semantic_logger, a sink
contract for logging backends, and a dispatcher that fans one payload out
to many backends. Built on top of loguru, with an optional SLS (Alibaba
Cloud Simple Log Service) backend.
"""

__version__ = "0.1.0"

from .levels import LogLevel, LOG_LEVELS, TRACE, DEBUG, INFO, WARN, ERROR, FATAL
from .environment import HostEnvironment
from .payload import LogPayload, new_log_payload
from .stack import (
    StackWalker,
    FrameStackWalker,
    NullStackWalker,
    capture_caller_name,
    capture_stack_trace,
    set_default_walker,
)
from .errors import FatalLogError, fatal_guard
from .logger import SemanticLogger
from .multi import MultiSemanticLogger
from .sinks import LoguruLogger, MemoryLogger, NullLogger
from .sls import SLSConfig, SLSClient, SLSSemanticLogger
from .core import LoggerFactory, LoggerBuilder

__all__ = [
    "LogLevel",
    "LOG_LEVELS",
    "TRACE",
    "DEBUG",
    "INFO",
    "WARN",
    "ERROR",
    "FATAL",
    "HostEnvironment",
    "LogPayload",
    "new_log_payload",
    "StackWalker",
    "FrameStackWalker",
    "NullStackWalker",
    "capture_caller_name",
    "capture_stack_trace",
    "set_default_walker",
    "FatalLogError",
    "fatal_guard",
    "SemanticLogger",
    "MultiSemanticLogger",
    "LoguruLogger",
    "MemoryLogger",
    "NullLogger",
    "SLSConfig",
    "SLSClient",
    "SLSSemanticLogger",
    "LoggerFactory",
    "LoggerBuilder",
]
