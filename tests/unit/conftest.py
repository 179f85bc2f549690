from __future__ import annotations

import pytest

from stublogger import StubLogger


@pytest.fixture
def sut() -> StubLogger:
    """A fresh stub per test; captured history never leaks between tests."""
    return StubLogger()
