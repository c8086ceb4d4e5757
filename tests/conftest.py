import httpx
import pytest

from link_cards.main import app

from tests.stubs import EXAMPLE_PAYLOAD, RecordingProvider


@pytest.fixture
def provider_ok() -> RecordingProvider:
    return RecordingProvider(lambda request: httpx.Response(200, json=EXAMPLE_PAYLOAD))


@pytest.fixture(autouse=True)
def clear_overrides():
    yield
    app.dependency_overrides.clear()
