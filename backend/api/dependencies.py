"""
FastAPI dependencies
"""

from fastapi import Depends, Header, Request
from domain.agentic.tools.external_tools.search_client import SearchAPIClient
from domain.agentic.tools.external_tools.search_tools import SearchCredentials
from domain.agentic.tools.registry import ToolRegistry


def get_search_client(request: Request) -> SearchAPIClient:
    return request.app.state.search_client


def get_credentials(
    email: str = Header(default=""),
    password: str = Header(default=""),
) -> SearchCredentials:
    """Credentials forwarded to the search backend, taken from the `email` / `password` headers."""
    return SearchCredentials(email=email, password=password)


def get_tool_registry(
    credentials: SearchCredentials = Depends(get_credentials),
    search_client: SearchAPIClient = Depends(get_search_client),
) -> ToolRegistry:
    registry = ToolRegistry()
    registry.register_search_tools(credentials, client=search_client)
    return registry
