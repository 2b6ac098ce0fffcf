"""
Shared fixtures
"""

from datetime import datetime, timezone

import pytest
from loguru import logger

from semlogger import HostEnvironment


FIXED_TIME = datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)


@pytest.fixture
def environment():
    """Deterministic host environment"""
    return HostEnvironment(
        application="test-app",
        pid=lambda: 4242,
        hostname=lambda: "test-host",
        clock=lambda: FIXED_TIME,
    )


@pytest.fixture
def loguru_records():
    """Collect loguru records emitted while the test runs"""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    yield records
    logger.remove(handler_id)
