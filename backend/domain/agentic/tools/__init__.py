"""
Tool system for agentic search
"""

from domain.agentic.tools.base import BaseTool
from domain.agentic.tools.registry import ToolRegistry
from domain.agentic.tools.external_tools.search_client import SearchAPIClient
from domain.agentic.tools.external_tools.search_tools import (
    EsgSearchTool,
    InternetSearchTool,
    RemoteSearchTool,
    SearchCredentials,
)

__all__ = [
    "BaseTool",
    "ToolRegistry",
    "SearchAPIClient",
    "RemoteSearchTool",
    "EsgSearchTool",
    "InternetSearchTool",
    "SearchCredentials",
]
