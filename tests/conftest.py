import pytest

from tests.base import RecordingSink


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
