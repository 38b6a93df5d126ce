"""
Services - Enrichment Service

Merges code search hits with the file content they point at.

Each bounded hit gets exactly one result slot. A hit that cannot be
addressed, or whose fetch fails, gets an EnrichedError in its slot; the
other slots are unaffected. Fetches run concurrently but results are
returned in hit order.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from devops_mcp.exceptions import MalformedHitError
from devops_mcp.schemas.search import (
    EnrichedContent,
    EnrichedError,
    EnrichedResult,
    EnrichmentResponse,
    VersionDescriptor,
)
from devops_mcp.services.fetch_service import FetchService
from devops_mcp.services.search_service import SearchService


logger = logging.getLogger(__name__)


def _nested_id(hit: Dict[str, Any], key: str) -> Optional[str]:
    value = hit.get(key)
    if isinstance(value, dict):
        return value.get("id") or None
    return None


def _first_change_id(hit: Dict[str, Any]) -> Optional[str]:
    versions = hit.get("versions")
    if isinstance(versions, list) and versions and isinstance(versions[0], dict):
        return versions[0].get("changeId") or None
    return None


def hit_address(hit: Any) -> Tuple[str, str, str, VersionDescriptor]:
    """
    Extract the coordinates of the file revision a hit refers to.

    Args:
        hit: Code search hit

    Returns:
        (project_id, repository_id, path, version)

    Raises:
        MalformedHitError: If the hit is not an object or a coordinate is missing
    """
    if not isinstance(hit, dict):
        raise MalformedHitError(hit)

    project_id = _nested_id(hit, "project")
    repository_id = _nested_id(hit, "repository")
    path = hit.get("path") or None
    version = VersionDescriptor.for_change(_first_change_id(hit))

    if not project_id or not repository_id or not path or version is None:
        raise MalformedHitError(hit)
    return project_id, repository_id, path, version


class EnrichmentService:
    """Hydrates code search hits with Git item content."""

    def __init__(self, fetcher: FetchService, concurrency: Optional[int] = None):
        self.fetcher = fetcher
        self.concurrency = concurrency or fetcher.settings.search.enrichment_concurrency

    async def enrich(self, raw_hits: Sequence[Dict[str, Any]], limit: int) -> List[EnrichedResult]:
        """
        Enrich the first ``limit`` hits.

        Args:
            raw_hits: Ranked hits from the search service
            limit: Maximum number of hits to enrich

        Returns:
            One EnrichedResult per bounded hit, in hit order
        """
        bounded = list(raw_hits[:max(limit, 0)])
        if not bounded:
            return []

        semaphore = asyncio.Semaphore(self.concurrency)
        return list(await asyncio.gather(
            *(self._enrich_one(index, hit, semaphore) for index, hit in enumerate(bounded))
        ))

    async def enrich_payload(self, payload: Dict[str, Any], limit: int) -> EnrichmentResponse:
        """Enrich the hits of a search payload, keeping the payload intact."""
        results = await self.enrich(SearchService.hits(payload), limit)
        return EnrichmentResponse(results=results, raw=payload)

    async def _enrich_one(
        self,
        index: int,
        hit: Dict[str, Any],
        semaphore: asyncio.Semaphore,
    ) -> EnrichedResult:
        try:
            project_id, repository_id, path, version = hit_address(hit)
        except MalformedHitError as e:
            logger.warning(f"Skipping hit {index}: missing projectId, repositoryId, filePath, or changeId")
            logger.debug(f"Hit {index}: {e}")
            return EnrichedError(str(e))

        async with semaphore:
            try:
                item = await self.fetcher.fetch_item(repository_id, path, project_id, version)
            except Exception as e:
                logger.warning(f"Could not fetch {path} for hit {index}: {e}")
                return EnrichedError(str(e) or e.__class__.__name__)

        return EnrichedContent(item)
