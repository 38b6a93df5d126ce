"""
Schemas Module - Data Models

Search queries, version descriptors and enrichment results.
"""

from devops_mcp.schemas.search import (
    IndexKind,
    SearchQuery,
    VersionDescriptor,
    EnrichedContent,
    EnrichedError,
    EnrichedResult,
    EnrichmentResponse,
    build_filters,
)

__all__ = [
    "IndexKind",
    "SearchQuery",
    "VersionDescriptor",
    "EnrichedContent",
    "EnrichedError",
    "EnrichedResult",
    "EnrichmentResponse",
    "build_filters",
]
