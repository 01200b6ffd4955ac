import threading

import pytest

from tests.testutils import CountingSignal


@pytest.fixture()
def signal() -> CountingSignal:
    return CountingSignal()


@pytest.fixture(autouse=True)
def join_workers():
    """joins worker threads that a test left running"""
    yield

    for t in threading.enumerate():
        if t.name == "add-worker":
            t.join(timeout=2)
