"""
DevOps MCP Server - Configuration

Pydantic Settings for all configuration via environment variables.
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional, Literal


class DevOpsSettings(BaseSettings):
    """Azure DevOps organization and API configuration."""
    organization: Optional[str] = Field(None, alias="AZURE_DEVOPS_ORG")
    token: Optional[str] = Field(None, alias="AZURE_DEVOPS_TOKEN")
    base_url: str = Field("https://dev.azure.com", alias="AZURE_DEVOPS_BASE_URL")
    search_url: str = Field(
        "https://almsearch.dev.azure.com", alias="AZURE_DEVOPS_SEARCH_URL"
    )
    api_version: str = Field("7.2-preview.1", alias="AZURE_DEVOPS_API_VERSION")
    timeout_seconds: float = Field(30.0, alias="AZURE_DEVOPS_TIMEOUT_SECONDS")

    model_config = {"env_prefix": "", "extra": "ignore"}

    @property
    def org_url(self) -> str:
        """Organization root, e.g. https://dev.azure.com/contoso."""
        return f"{self.base_url.rstrip('/')}/{self.organization}"


class SearchSettings(BaseSettings):
    """Search and enrichment configuration."""
    enrichment_concurrency: int = Field(
        5, ge=1, alias="SEARCH_ENRICHMENT_CONCURRENCY"
    )

    model_config = {"env_prefix": "", "extra": "ignore"}


class MCPSettings(BaseSettings):
    """MCP server configuration."""
    transport: Literal["sse", "stdio"] = Field("stdio", alias="MCP_TRANSPORT")
    port: int = Field(8080, alias="MCP_PORT")
    host: str = Field("0.0.0.0", alias="MCP_HOST")

    model_config = {"env_prefix": "", "extra": "ignore"}


class LogSettings(BaseSettings):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", alias="LOG_LEVEL"
    )
    format: Literal["json", "text"] = Field("text", alias="LOG_FORMAT")

    model_config = {"env_prefix": "", "extra": "ignore"}


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""
    devops: DevOpsSettings = Field(default_factory=DevOpsSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    mcp: MCPSettings = Field(default_factory=MCPSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = {"env_prefix": "", "extra": "ignore"}


def get_settings(organization: Optional[str] = None) -> Settings:
    """
    Load settings from environment variables.

    Args:
        organization: Overrides AZURE_DEVOPS_ORG when given (CLI argument)

    Returns:
        Settings
    """
    from dotenv import load_dotenv
    load_dotenv()
    settings = Settings()
    if organization:
        settings.devops.organization = organization
    return settings
