"""
Services Module - Business Logic Layer

Provides the Azure DevOps client, search, content fetch and enrichment
services.
"""

from devops_mcp.services.devops_client import DevOpsClient
from devops_mcp.services.search_service import SearchService
from devops_mcp.services.fetch_service import FetchService
from devops_mcp.services.enrichment_service import EnrichmentService

__all__ = [
    "DevOpsClient",
    "SearchService",
    "FetchService",
    "EnrichmentService",
]
