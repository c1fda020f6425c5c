"""
Tool listing and invocation endpoints
"""

import json
import httpx
from fastapi import APIRouter, HTTPException, Depends, status
from pydantic import ValidationError
from domain.agentic.tools.registry import ToolRegistry
from api.schemas.tools import ToolInfo, ToolsResponse, ToolCallRequest, ToolCallResponse
from api.dependencies import get_tool_registry
from core.exceptions import ToolNotFoundError, ToolConfigurationError, SearchHTTPStatusError

router = APIRouter(prefix="/api/v1/tools", tags=["tools"])


@router.get("", response_model=ToolsResponse)
async def list_tools(
    registry: ToolRegistry = Depends(get_tool_registry)
):
    """
    List available tools.

    Returns:
        ToolsResponse containing:
            - tools: List[ToolInfo] - each with name, description and
              input_schema (JSON schema format)
    """
    tools = [
        ToolInfo(
            name=tool.name,
            description=tool.description,
            input_schema=tool.input_schema,
        )
        for tool in registry.get_all_tools()
    ]
    return ToolsResponse(tools=tools)


@router.post("/{tool_name}", response_model=ToolCallResponse)
async def call_tool(
    tool_name: str,
    call_request: ToolCallRequest,
    registry: ToolRegistry = Depends(get_tool_registry)
):
    """
    Call a tool by name with the credentials given in the `email` / `password` headers.

    Args:
        tool_name: Registered tool name (e.g. "Search_ESG_Tool")
        call_request: ToolCallRequest with the tool `arguments`

    Returns:
        ToolCallResponse with the backend's JSON response as text in `content`.

    Raises:
        HTTPException:
            404 unknown tool, 422 invalid arguments, 500 BASE_URL unset,
            502 backend error status or invalid JSON, 503 backend unreachable
    """
    try:
        content = await registry.execute_tool(tool_name, call_request.arguments)
        return ToolCallResponse(name=tool_name, content=content)
    except ToolNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False),
        )
    except ToolConfigurationError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    except SearchHTTPStatusError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"message": str(e), "upstream_status": e.status_code},
        )
    except json.JSONDecodeError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Invalid JSON from search backend: {e}",
        )
    except httpx.TransportError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Search backend unreachable: {e}",
        )
