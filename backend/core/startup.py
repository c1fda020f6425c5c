"""
Application startup and initialization logic
"""

import logging
from fastapi import FastAPI

from domain.agentic.tools.external_tools.search_client import SearchAPIClient
from core.config import settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = None) -> None:
    """Configure root logging from settings.log_level."""
    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)


async def initialize_search_system(app: FastAPI):
    """Create the shared search API client. Tools are bound per request (credentials differ)."""
    if not settings.base_url:
        logger.warning("BASE_URL is not set. Search tool calls will fail until it is configured.")

    app.state.search_client = SearchAPIClient()
    logger.info(f"Search system initialized (base_url={settings.base_url or '<unset>'})")


async def cleanup_search_system(app: FastAPI):
    """Cleanup search system resources (HTTP connections)."""
    if hasattr(app.state, 'search_client') and app.state.search_client:
        try:
            await app.state.search_client.close()
            logger.info("Search client cleaned up")
        except Exception as e:
            logger.error(f"Error during search client cleanup: {e}", exc_info=True)
