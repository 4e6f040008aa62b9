from collections.abc import Generator

import httpx
import pytest

from fileai_mcp.config.settings import Settings
from fileai_mcp.remote.httpx_client import FileAIHttpClient
from fileai_mcp.tools.dispatcher import ToolDispatcher, build_dispatcher
from fake_backend import FakeFileAIBackend


@pytest.fixture()
def backend() -> FakeFileAIBackend:
    return FakeFileAIBackend()


@pytest.fixture()
def dispatcher(
    backend: FakeFileAIBackend,
    test_settings: Settings,
) -> Generator[ToolDispatcher, None, None]:
    client = FileAIHttpClient(
        api_key=test_settings.fileai_api_key,
        base_url=test_settings.fileai_base_url,
        timeout_seconds=test_settings.fileai_timeout_seconds,
        transport=httpx.MockTransport(backend.handle),
    )
    with client:
        yield build_dispatcher(test_settings, client)
