"""
Remote search tools (external) - ESG semantic search and internet search over HTTP
"""

import logging
from abc import abstractmethod
from typing import Dict, Any, List, Optional, Type
from pydantic import BaseModel, ConfigDict, Field
from domain.agentic.tools.base import BaseTool
from domain.agentic.tools.external_tools.search_client import SearchAPIClient
from core.config import Settings, settings as default_settings
from core.exceptions import ToolConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 5
DEFAULT_MAX_RESULTS = 5


class SearchCredentials(BaseModel):
    """User credentials forwarded to the search backend as `email` / `password` headers."""
    model_config = ConfigDict(frozen=True)

    email: str
    password: str = Field(..., repr=False)


class EsgSearchInput(BaseModel):
    """Input schema for Search_ESG_Tool"""
    query: str = Field(..., min_length=1, description="Requirements or questions from the user.")
    docIds: Optional[List[str]] = Field(None, description="Document ids to filter the search.")
    topK: int = Field(DEFAULT_TOP_K, description="Number of top chunk results to return.")
    # Accepted but never sent to the backend (see DESIGN.md, "extK")
    extK: Optional[int] = Field(
        None,
        description="Number of additional chunks to include before and after each topK result.",
    )


class InternetSearchInput(BaseModel):
    """Input schema for Search_Internet_Tool"""
    query: str = Field(..., min_length=1, description="Requirements or questions from the user.")
    maxResults: int = Field(DEFAULT_MAX_RESULTS, description="Number of results to return.")


def build_doc_id_filter(doc_ids: Optional[List[str]]) -> Dict[str, Any]:
    """Inclusion filter on `rec_id`, or an empty dict when there is nothing to filter on."""
    if doc_ids:
        return {"rec_id": {"$in": list(doc_ids)}}
    return {}


def build_esg_request_body(query: str, top_k: int, doc_ids: Optional[List[str]] = None) -> Dict[str, Any]:
    """ESG search body. `filter` is only present when it is non-empty."""
    body: Dict[str, Any] = {"query": query, "topK": top_k}
    search_filter = build_doc_id_filter(doc_ids)
    if search_filter:
        body["filter"] = search_filter
    return body


class RemoteSearchTool(BaseTool):
    """
    Shared invocation pattern for tools backed by the search API.

    validate args -> build JSON body -> authenticated POST to `<BASE_URL>/<endpoint>`
    -> JSON response as text. Failures are logged and re-raised unchanged.

    Subclasses set `tool_name`, `tool_description`, `args_model`, `endpoint` and
    implement `build_request_body`.
    """

    tool_name: str
    tool_description: str
    args_model: Type[BaseModel]
    endpoint: str

    def __init__(
        self,
        credentials: SearchCredentials,
        client: Optional[SearchAPIClient] = None,
        settings: Optional[Settings] = None,
    ):
        self._credentials = credentials
        self._owns_client = client is None
        self.client = client or SearchAPIClient()
        self.settings = settings or default_settings

    @property
    def name(self) -> str:
        return self.tool_name

    @property
    def description(self) -> str:
        return self.tool_description

    @property
    def input_schema(self) -> Dict[str, Any]:
        return self.args_model.model_json_schema()

    @property
    def credentials(self) -> SearchCredentials:
        return self._credentials

    @abstractmethod
    def build_request_body(self, args: BaseModel) -> Dict[str, Any]:
        """JSON body sent to the endpoint, built from validated args"""
        pass

    def build_headers(self) -> Dict[str, str]:
        """Auth headers: anon key as bearer token plus the user's credentials as custom headers."""
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.settings.supabase_anon_key or ''}",
            "email": self._credentials.email,
            "password": self._credentials.password,
            "x-region": self.settings.x_region or "",
        }

    def endpoint_url(self) -> str:
        base_url = self.settings.base_url
        if not base_url:
            raise ToolConfigurationError(f"BASE_URL is not configured. Cannot execute tool {self.name}.")
        return f"{base_url.rstrip('/')}/{self.endpoint}"

    async def execute(self, /, **kwargs) -> str:
        """
        Validate arguments and run the search.

        Returns:
            JSON response of the backend, re-serialised as compact text.

        Raises:
            pydantic.ValidationError: Invalid arguments (no request is made).
            ToolConfigurationError: BASE_URL unset (no request is made).
            SearchHTTPStatusError: Backend answered with a non-2xx status.
            httpx.TransportError: Network failure.
            json.JSONDecodeError: Backend answered with invalid JSON.
        """
        args = self.args_model.model_validate(kwargs)
        body = self.build_request_body(args)
        url = self.endpoint_url()

        try:
            return await self.client.post_json(url, body, self.build_headers())
        except Exception as e:
            logger.error(f"Error making the request to {url}: {e}")
            raise

    async def close(self):
        """Close the search client if this tool created it"""
        if self._owns_client:
            await self.client.close()


class EsgSearchTool(RemoteSearchTool):
    """Semantic search over the ESG document database, optionally restricted to given documents."""

    tool_name = "Search_ESG_Tool"
    tool_description = (
        "Use this tool to perform semantic search on the ESG database for precise and "
        "specialized information."
    )
    args_model = EsgSearchInput
    endpoint = "esg_search"

    def build_request_body(self, args: EsgSearchInput) -> Dict[str, Any]:
        return build_esg_request_body(args.query, args.topK, args.docIds)


class InternetSearchTool(RemoteSearchTool):
    """Internet search for up-to-date information."""

    tool_name = "Search_Internet_Tool"
    tool_description = "Call this tool to search internet for up-to-date information."
    args_model = InternetSearchInput
    endpoint = "internet_search"

    def build_request_body(self, args: InternetSearchInput) -> Dict[str, Any]:
        return {"query": args.query, "maxResults": args.maxResults}
