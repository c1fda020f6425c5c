import json
from typing import Any, List, Optional

import anyio
import httpx
import pytest

from core.config import Settings
from domain.agentic.tools.external_tools.search_client import SearchAPIClient
from domain.agentic.tools.external_tools.search_tools import (
    EsgSearchTool,
    InternetSearchTool,
    SearchCredentials,
)

BASE_URL = "https://search.test/functions/v1"


class RecordingBackend:
    """Fake search backend: records every request and answers with a canned response."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.json_body: Any = {"results": ["a", "b"]}
        self.raw_content: Optional[bytes] = None
        self.error: Optional[Exception] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw_content is not None:
            return httpx.Response(self.status_code, content=self.raw_content)
        return httpx.Response(self.status_code, json=self.json_body)

    def sent_json(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def search_client(backend):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(backend.handler))
    yield SearchAPIClient(http_client=http_client)
    anyio.run(http_client.aclose)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(base_url=BASE_URL, supabase_anon_key="anon-key", x_region="eu-central-1")


@pytest.fixture
def credentials() -> SearchCredentials:
    return SearchCredentials(email="analyst@example.com", password="s3cret")


@pytest.fixture
def esg_tool(credentials, search_client, test_settings) -> EsgSearchTool:
    return EsgSearchTool(credentials, client=search_client, settings=test_settings)


@pytest.fixture
def internet_tool(credentials, search_client, test_settings) -> InternetSearchTool:
    return InternetSearchTool(credentials, client=search_client, settings=test_settings)
