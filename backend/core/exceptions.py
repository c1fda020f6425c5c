"""
Custom exception hierarchy for the application
"""


class AgenticException(Exception):
    """Base exception for agentic system errors"""
    pass


class ToolExecutionError(AgenticException):
    """Error executing a tool"""
    pass


class ToolNotFoundError(ToolExecutionError):
    """Requested tool is not registered"""
    pass


class ToolConfigurationError(ToolExecutionError):
    """Tool cannot run with the current settings (e.g. BASE_URL unset)"""
    pass


class SearchHTTPStatusError(ToolExecutionError):
    """Search backend answered with a non-2xx status"""

    def __init__(self, status_code: int, status_text: str, url: str = ""):
        self.status_code = status_code
        self.status_text = status_text
        self.url = url
        super().__init__(f"HTTP error: {status_code} {status_text}")
