"""
Tool registry - central registry for all tools
"""

import logging
from typing import List, Dict, Any, Optional
from domain.agentic.tools.base import BaseTool
from domain.agentic.tools.external_tools.search_client import SearchAPIClient
from domain.agentic.tools.external_tools.search_tools import (
    EsgSearchTool,
    InternetSearchTool,
    SearchCredentials,
)
from core.config import Settings
from core.exceptions import ToolNotFoundError

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Central tool registry that manages all tools."""

    def __init__(self):
        self._tools: Dict[str, BaseTool] = {}
        self._owned_clients: List[SearchAPIClient] = []
        self.logger = logger

    def register_tool(self, tool: BaseTool):
        """Register a tool"""
        if tool.name in self._tools:
            self.logger.warning(f"Overwriting registered tool {tool.name}.")
        self._tools[tool.name] = tool
        self.logger.info(f"Registered tool: {tool.name}")

    def register_search_tools(
        self,
        credentials: SearchCredentials,
        client: Optional[SearchAPIClient] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Register the ESG and internet search tools bound to one set of credentials.

        Both tools share `client`. When none is given the registry creates one and
        closes it in `close()`.
        """
        if client is None:
            client = SearchAPIClient()
            self._owned_clients.append(client)
        for tool_class in (EsgSearchTool, InternetSearchTool):
            self.register_tool(tool_class(credentials, client=client, settings=settings))

    def get_tool(self, tool_name: str) -> BaseTool:
        tool = self._tools.get(tool_name)
        if not tool:
            raise ToolNotFoundError(f"Tool {tool_name} not found")
        return tool

    def get_all_tools(self) -> List[BaseTool]:
        """Get all registered tools"""
        return list(self._tools.values())

    def get_tool_definitions(self) -> List[Dict[str, Any]]:
        """Function-calling definitions of all registered tools."""
        return [tool.to_definition() for tool in self._tools.values()]

    async def execute_tool(self, tool_name: str, tool_args: Dict[str, Any]) -> str:
        """Execute a tool by name. Tool errors propagate unchanged."""
        tool = self.get_tool(tool_name)
        self.logger.info(f"Calling tool {tool_name} with args {tool_args}")
        return await tool.call(tool_args)

    async def close(self):
        """Close search clients created by this registry"""
        for client in self._owned_clients:
            await client.close()
        self._owned_clients.clear()
