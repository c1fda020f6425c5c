"""
Abstract tool interface
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Mapping, Optional


class BaseTool(ABC):
    """Abstract base class for all tools"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name"""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Tool description"""
        pass

    @property
    @abstractmethod
    def input_schema(self) -> Dict[str, Any]:
        """JSON schema for tool inputs"""
        pass

    @abstractmethod
    async def execute(self, /, **kwargs) -> str:
        """
        Execute the tool.

        Args:
            **kwargs: Tool arguments

        Returns:
            Tool execution result as text
        """
        pass

    async def call(self, arguments: Optional[Mapping[str, Any]] = None) -> str:
        """Execute the tool with an argument mapping (as decoded from an LLM tool call)."""
        return await self.execute(**dict(arguments or {}))

    def to_definition(self) -> Dict[str, Any]:
        """Function-calling definition for LLM providers (OpenAI/Groq format)."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.input_schema,
            }
        }
