import logging

import pytest

from pushstream.testing import RecordingObserver
from tests.helpers import EventHistory

logging.basicConfig(level=logging.DEBUG)


@pytest.fixture(scope="function")
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture(scope="function")
def event_history() -> EventHistory:
    return EventHistory()
