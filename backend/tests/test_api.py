import httpx
import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_search_client
from core.config import settings
from main import app

CREDENTIAL_HEADERS = {"email": "analyst@example.com", "password": "s3cret"}


@pytest.fixture
def client(search_client, monkeypatch):
    monkeypatch.setattr(settings, "base_url", "https://search.test/functions/v1")
    monkeypatch.setattr(settings, "supabase_anon_key", "anon-key")
    monkeypatch.setattr(settings, "x_region", "eu-central-1")
    app.dependency_overrides[get_search_client] = lambda: search_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_root(client) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["endpoints"]["tools"] == "/api/v1/tools"


def test_list_tools(client) -> None:
    response = client.get("/api/v1/tools")

    assert response.status_code == 200
    tools = {tool["name"]: tool for tool in response.json()["tools"]}
    assert set(tools) == {"Search_ESG_Tool", "Search_Internet_Tool"}
    assert "docIds" in tools["Search_ESG_Tool"]["input_schema"]["properties"]


def test_call_esg_tool(client, backend) -> None:
    response = client.post(
        "/api/v1/tools/Search_ESG_Tool",
        json={"arguments": {"query": "carbon emissions", "docIds": ["doc1", "doc2"], "topK": 3}},
        headers=CREDENTIAL_HEADERS,
    )

    assert response.status_code == 200
    assert response.json() == {"name": "Search_ESG_Tool", "content": '{"results":["a","b"]}'}
    request = backend.requests[0]
    assert request.headers["email"] == "analyst@example.com"
    assert request.headers["password"] == "s3cret"
    assert request.headers["authorization"] == "Bearer anon-key"
    assert backend.sent_json()["filter"] == {"rec_id": {"$in": ["doc1", "doc2"]}}


def test_call_internet_tool(client, backend) -> None:
    response = client.post(
        "/api/v1/tools/Search_Internet_Tool",
        json={"arguments": {"query": "latest ESG regulations"}},
        headers=CREDENTIAL_HEADERS,
    )

    assert response.status_code == 200
    assert backend.sent_json() == {"query": "latest ESG regulations", "maxResults": 5}


def test_call_unknown_tool(client, backend) -> None:
    response = client.post("/api/v1/tools/Search_Weather_Tool", json={"arguments": {"query": "q"}})

    assert response.status_code == 404
    assert backend.requests == []


def test_call_with_empty_query(client, backend) -> None:
    response = client.post(
        "/api/v1/tools/Search_ESG_Tool", json={"arguments": {"query": ""}}, headers=CREDENTIAL_HEADERS
    )

    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"] == ["query"]
    assert backend.requests == []


def test_upstream_error_status(client, backend) -> None:
    backend.status_code = 401
    backend.raw_content = b"Unauthorized"

    response = client.post(
        "/api/v1/tools/Search_ESG_Tool", json={"arguments": {"query": "q"}}, headers=CREDENTIAL_HEADERS
    )

    assert response.status_code == 502
    assert response.json()["detail"]["upstream_status"] == 401


def test_upstream_invalid_json(client, backend) -> None:
    backend.raw_content = b"<html></html>"

    response = client.post(
        "/api/v1/tools/Search_Internet_Tool", json={"arguments": {"query": "q"}}, headers=CREDENTIAL_HEADERS
    )

    assert response.status_code == 502


def test_upstream_unreachable(client, backend) -> None:
    backend.error = httpx.ConnectError("Connection refused")

    response = client.post(
        "/api/v1/tools/Search_Internet_Tool", json={"arguments": {"query": "q"}}, headers=CREDENTIAL_HEADERS
    )

    assert response.status_code == 503


def test_base_url_not_configured(client, backend, monkeypatch) -> None:
    monkeypatch.setattr(settings, "base_url", "")

    response = client.post(
        "/api/v1/tools/Search_ESG_Tool", json={"arguments": {"query": "q"}}, headers=CREDENTIAL_HEADERS
    )

    assert response.status_code == 500
    assert "BASE_URL" in response.json()["detail"]
    assert backend.requests == []


def test_call_with_argument_named_self(client, backend) -> None:
    response = client.post(
        "/api/v1/tools/Search_ESG_Tool",
        json={"arguments": {"query": "q", "self": 1}},
        headers=CREDENTIAL_HEADERS,
    )

    assert response.status_code == 200
    assert backend.sent_json() == {"query": "q", "topK": 5}
