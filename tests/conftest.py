import httpx
import pytest

from assistants_client import AssistantsClient
from tests.common import BASE_URL, Recorder


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def client(recorder: Recorder):
    with AssistantsClient(
        "sk-test",
        base_url=BASE_URL,
        transport=httpx.MockTransport(recorder),
    ) as client:
        yield client
