"""
Configuration settings for the subgraph clients

Loads environment variables and provides client configuration.
"""
import os
from typing import Optional
from dotenv import load_dotenv

from .constants import DEFAULT_TIMEOUT, DEFAULT_MAX_RETRIES, DEFAULT_RETRY_DELAY

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Client settings"""

    # Subgraph endpoints
    INFO_SUBGRAPH_URL: str = os.getenv("FARMING_V3_INFO_SUBGRAPH_URL", "")
    FARMING_SUBGRAPH_URL: str = os.getenv("FARMING_V3_FARMING_SUBGRAPH_URL", "")

    # The Graph API
    GRAPH_API_KEY: Optional[str] = os.getenv("GRAPH_API_KEY") or None

    # Transport
    GRAPH_TIMEOUT: int = int(os.getenv("GRAPH_TIMEOUT", DEFAULT_TIMEOUT))
    GRAPH_MAX_RETRIES: int = int(os.getenv("GRAPH_MAX_RETRIES", DEFAULT_MAX_RETRIES))
    GRAPH_RETRY_DELAY: float = float(os.getenv("GRAPH_RETRY_DELAY", DEFAULT_RETRY_DELAY))
    GRAPH_ERROR_POLICY: str = os.getenv("GRAPH_ERROR_POLICY", "none").lower()

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    SUBGRAPH_URL_VARIABLES = {
        "info": "FARMING_V3_INFO_SUBGRAPH_URL",
        "farming": "FARMING_V3_FARMING_SUBGRAPH_URL",
    }

    def get_subgraph_url(self, subgraph: str) -> str:
        """Get endpoint URL for 'info' or 'farming'"""
        if subgraph == "info":
            return self.INFO_SUBGRAPH_URL
        if subgraph == "farming":
            return self.FARMING_SUBGRAPH_URL
        raise ValueError(f"Unknown subgraph: {subgraph}")


# Create global settings instance
settings = Settings()
