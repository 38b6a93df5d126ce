"""
Services - Search Service

Full-text queries against the Azure DevOps code, wiki and work item
search indexes.
"""

import json
import logging
from typing import Any, Dict, List

from devops_mcp.exceptions import RemoteServiceError
from devops_mcp.schemas.search import IndexKind, SearchQuery
from devops_mcp.services.devops_client import DevOpsClient


logger = logging.getLogger(__name__)


class SearchService:
    """Issues search queries and returns the raw search payload."""

    def __init__(self, client: DevOpsClient):
        self.client = client
        self.settings = client.settings

    def endpoint_url(self, index_kind: IndexKind) -> str:
        """Search endpoint for an index, scoped to the configured organization."""
        base = self.settings.devops.search_url.rstrip("/")
        return f"{base}/{self.client.organization}/_apis/search/{index_kind.endpoint}"

    async def search_text(self, query: SearchQuery, index_kind: IndexKind) -> str:
        """
        Run a search and return the response body verbatim.

        Args:
            query: Validated search query
            index_kind: Index to search

        Returns:
            Raw response text

        Raises:
            RemoteServiceError: If the search service does not return success
        """
        try:
            response = await self.client.request(
                "POST",
                self.endpoint_url(index_kind),
                params={"api-version": self.settings.devops.api_version},
                json=query.to_request_body(),
                service=f"Azure DevOps {index_kind.label} Search",
            )
        except RemoteServiceError as e:
            logger.error(f"{index_kind.label} search failed: {e}")
            raise
        return response.text

    async def search(self, query: SearchQuery, index_kind: IndexKind) -> Dict[str, Any]:
        """Run a search and parse the payload."""
        return json.loads(await self.search_text(query, index_kind))

    @staticmethod
    def hits(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Ranked hits of a payload; a missing or non-list ``results`` field means none."""
        results = payload.get("results")
        if not isinstance(results, list):
            return []
        return results
