"""
Unified configuration and settings
Search backend endpoint, auth and API server config
"""

from typing import Optional
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load environment variables
load_dotenv()


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Values can be set via:
    1. Environment variables (highest priority)
    2. .env file (loaded by load_dotenv())
    3. Default values below (lowest priority)
    """

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    environment: str = "development"  # development, staging, production
    log_level: str = "INFO"

    # ------------------------
    # Search backend
    # ------------------------

    # e.g. https://<project>.supabase.co/functions/v1
    base_url: str = ""
    supabase_anon_key: str = ""
    x_region: str = ""
    # Seconds. None disables the httpx timeout entirely
    search_api_timeout: Optional[float] = None

    class Config:
        """
        Pydantic configuration for settings loading.

        - env_file: Which .env file to read
        - env_file_encoding: File encoding
        - extra: What to do with extra fields in .env that aren't in this class
        """
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Singleton settings instance
settings = Settings()
