"""Configuration management using Pydantic Settings."""

from typing import Dict, Optional
from pydantic import Field
from pydantic_settings import BaseSettings


DEFAULT_YARD_NAMES = {
    "loc1": "Detroit Yard",
    "loc2": "Chicago Terminal",
    "loc3": "Shop - Cleveland",
    "loc4": "Toledo Drop Yard",
    "loc5": "Customer Site - Acme Corp",
}


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden using environment variables or .env file.
    """

    # Neo4j Database Configuration
    neo4j_uri: str = Field(
        default="bolt://localhost:7687",
        description="Neo4j database connection URI"
    )
    neo4j_user: str = Field(
        default="neo4j",
        description="Neo4j username"
    )
    neo4j_password: str = Field(
        ...,
        description="Neo4j password (required)"
    )
    neo4j_max_pool_size: int = Field(
        default=50,
        ge=1,
        description="Maximum number of pooled driver connections"
    )
    neo4j_connection_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Seconds to wait for a pooled connection or a transaction retry"
    )

    # API Configuration
    api_key: Optional[str] = Field(
        default=None,
        description="API key for authentication. If not set, authentication is disabled (dev mode)"
    )

    # Application Settings
    app_name: str = Field(
        default="Trailers Service",
        description="Application name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )
    debug: bool = Field(
        default=False,
        description="Debug mode flag"
    )

    # Listing
    default_page_size: int = Field(
        default=10,
        ge=1,
        description="Page size used when a listing request does not specify one"
    )
    max_page_size: int = Field(
        default=100,
        ge=1,
        description="Largest page size a listing request may ask for"
    )

    # Yards
    yard_names: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_YARD_NAMES),
        description="Assigned-yard reference to display name lookup (JSON object in env)"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_file: str = Field(
        default="logs/api.log",
        description="Path to log file"
    )

    class Config:
        """Pydantic config."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

        # Allow extra fields from environment
        extra = "ignore"

        # Example values for documentation
        json_schema_extra = {
            "example": {
                "neo4j_uri": "bolt://localhost:7687",
                "neo4j_user": "neo4j",
                "neo4j_password": "secure_password",
                "api_key": "your_api_key_here",
                "default_page_size": 10,
                "yard_names": {"loc1": "Detroit Yard"},
                "log_level": "INFO"
            }
        }


# Create a singleton instance
settings = Settings()
