"""
Call stack introspection used to fill ``action`` and ``backtrace``
"""

import sys
from abc import ABC, abstractmethod
from types import FrameType
from typing import List, Optional


def _qualified_name(frame: FrameType) -> str:
    code = frame.f_code
    qualname = getattr(code, "co_qualname", code.co_name)
    module = frame.f_globals.get("__name__")
    if module:
        return f"{module}.{qualname}"
    return qualname


def _frame_at(depth: int) -> Optional[FrameType]:
    try:
        return sys._getframe(depth + 1)
    except ValueError:
        return None


class StackWalker(ABC):
    """
    Interface for walking the call stack.

    ``skip`` counts frames above the code that called the walker method:
    ``caller_name(0)`` names that code itself, ``caller_name(1)`` its
    caller, and so on.
    """

    @abstractmethod
    def caller_name(self, skip: int = 0) -> str:
        """Fully qualified name of the function ``skip`` frames up"""

    @abstractmethod
    def frames(self, skip: int = 0) -> List[str]:
        """``file:line function()`` for each frame from ``skip`` up"""


class FrameStackWalker(StackWalker):
    """Stack walker backed by interpreter frames"""

    def caller_name(self, skip: int = 0) -> str:
        frame = _frame_at(skip + 1)
        if frame is None:
            return ""
        return _qualified_name(frame)

    def frames(self, skip: int = 0) -> List[str]:
        stacktrace: List[str] = []
        frame = _frame_at(skip + 1)
        while frame is not None:
            stacktrace.append(
                f"{frame.f_code.co_filename}:{frame.f_lineno} {_qualified_name(frame)}()"
            )
            frame = frame.f_back
        return stacktrace


class NullStackWalker(StackWalker):
    """Walker for environments without usable frame information"""

    def caller_name(self, skip: int = 0) -> str:
        return ""

    def frames(self, skip: int = 0) -> List[str]:
        return []


default_walker: StackWalker = FrameStackWalker()


def set_default_walker(walker: StackWalker) -> StackWalker:
    """Install the walker used by the capture helpers; returns the previous one"""
    global default_walker
    previous = default_walker
    default_walker = walker
    return previous


def capture_caller_name(skip: int = 0) -> str:
    """Fully qualified name of the function ``skip`` frames above the caller"""
    return default_walker.caller_name(skip + 1)


def capture_stack_trace() -> List[str]:
    """
    Describe every frame from the caller of this function up to the entry
    point, innermost first, as ``file:line function()``.
    """
    return default_walker.frames(1)
