"""
Tests for call stack introspection
"""

import inspect

import pytest

import semlogger.stack as stack
from semlogger import (
    INFO,
    FrameStackWalker,
    NullStackWalker,
    StackWalker,
    capture_caller_name,
    capture_stack_trace,
    new_log_payload,
    set_default_walker,
)


def _inner():
    return capture_caller_name(1)


def _outer():
    return _inner()


def _emit_payload():
    return new_log_payload(INFO, "from helper")


def _deeper_trace():
    return capture_stack_trace()


class TestCaptureCallerName:
    """Test caller name capture"""

    def test_names_invoking_function(self):
        name = capture_caller_name(0)

        assert name.endswith("test_names_invoking_function")

    def test_skip_one_names_the_caller(self):
        assert _outer().endswith("_outer")

    def test_name_is_module_qualified(self):
        assert _outer() == f"{__name__}._outer"

    def test_skip_past_stack_top(self):
        """Skipping beyond the entry point yields an empty name"""
        assert capture_caller_name(10_000) == ""

    def test_payload_action_is_constructor_caller(self):
        payload = _emit_payload()

        assert payload.action == f"{__name__}._emit_payload"


class TestCaptureStackTrace:
    """Test backtrace capture"""

    def test_frame_count_excludes_own_frame(self):
        """One descriptor per frame from the caller up to the entry point"""
        trace = capture_stack_trace()

        assert len(trace) == len(inspect.stack())

    def test_deeper_call_adds_one_frame(self):
        assert len(_deeper_trace()) == len(capture_stack_trace()) + 1

    def test_first_frame_is_caller(self):
        trace = capture_stack_trace()

        assert "test_stack.py:" in trace[0]
        assert trace[0].endswith("test_first_frame_is_caller()")

    def test_descriptor_format(self):
        for line in capture_stack_trace()[:2]:
            location, function = line.rsplit(" ", 1)
            assert function.endswith("()")
            assert location.rsplit(":", 1)[1].isdigit()


class TestStackWalkers:
    """Test walker implementations"""

    def test_frame_walker_direct(self):
        walker = FrameStackWalker()

        assert walker.caller_name(0).endswith("test_frame_walker_direct")
        assert walker.frames(0)[0].endswith("test_frame_walker_direct()")

    def test_null_walker(self):
        walker = NullStackWalker()

        assert walker.caller_name(3) == ""
        assert walker.frames() == []

    def test_set_default_walker(self):
        previous = set_default_walker(NullStackWalker())
        try:
            assert capture_caller_name(0) == ""
            assert capture_stack_trace() == []
            assert _emit_payload().action == ""
        finally:
            restored = set_default_walker(previous)

        assert isinstance(previous, FrameStackWalker)
        assert isinstance(restored, NullStackWalker)
        assert stack.default_walker is previous

    def test_base_walker_is_abstract(self):
        with pytest.raises(TypeError):
            StackWalker()
