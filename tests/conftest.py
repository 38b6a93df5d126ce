"""
Shared fixtures: settings for a test organization and a DevOpsClient
whose HTTP traffic goes to an in-process handler.
"""

import httpx
import pytest

from devops_mcp.config import DevOpsSettings, SearchSettings, Settings
from devops_mcp.services import DevOpsClient
from devops_mcp.useragent import UserAgentComposer


@pytest.fixture
def settings():
    return Settings(
        devops=DevOpsSettings(
            AZURE_DEVOPS_ORG="contoso",
            AZURE_DEVOPS_TOKEN="test-token",
            AZURE_DEVOPS_BASE_URL="https://dev.azure.com",
            AZURE_DEVOPS_SEARCH_URL="https://almsearch.dev.azure.com",
            AZURE_DEVOPS_API_VERSION="7.2-preview.1",
        ),
        search=SearchSettings(SEARCH_ENRICHMENT_CONCURRENCY=5),
    )


@pytest.fixture
def make_client(settings):
    """Build a DevOpsClient routed to ``handler(request) -> httpx.Response``."""
    def _make(handler):
        return DevOpsClient(
            settings,
            user_agent=UserAgentComposer("1.2.3"),
            transport=httpx.MockTransport(handler),
        )
    return _make
