"""
Pydantic models for tool-related request/response schemas
"""

from pydantic import BaseModel, Field
from typing import Dict, Any, List


class ToolInfo(BaseModel):
    """Tool information model"""
    name: str
    description: str
    input_schema: Dict[str, Any]


class ToolsResponse(BaseModel):
    """Response model for tools endpoint"""
    tools: List[ToolInfo]


class ToolCallRequest(BaseModel):
    """Request model for calling a tool"""
    arguments: Dict[str, Any] = Field(
        default_factory=dict,
        description="Tool arguments, validated against the tool's input_schema.",
    )

    class Config:
        json_schema_extra = {
            "example": {
                "arguments": {
                    "query": "carbon emissions",
                    "docIds": ["doc1", "doc2"],
                    "topK": 3
                }
            }
        }


class ToolCallResponse(BaseModel):
    """Response model for a tool call"""
    name: str
    content: str  # JSON text returned by the search backend
