"""
Schemas - Search Models

Search query sent to the Azure DevOps search service and the enrichment
results merged from the Git items service.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class IndexKind(str, Enum):
    """Search index addressed by a query."""
    CODE = "code"
    WIKI = "wiki"
    WORKITEM = "workitem"

    @property
    def endpoint(self) -> str:
        return {
            IndexKind.CODE: "codesearchresults",
            IndexKind.WIKI: "wikisearchresults",
            IndexKind.WORKITEM: "workitemsearchresults",
        }[self]

    @property
    def label(self) -> str:
        return {
            IndexKind.CODE: "Code",
            IndexKind.WIKI: "Wiki",
            IndexKind.WORKITEM: "Work Item",
        }[self]

    @property
    def default_top(self) -> int:
        return 5 if self is IndexKind.CODE else 10


class SearchQuery(BaseModel):
    """Search request body. Unknown fields are rejected."""
    search_text: str = Field(alias="searchText")
    skip: int = Field(default=0, ge=0, alias="$skip")
    top: int = Field(default=5, ge=0, alias="$top")
    filters: Dict[str, List[str]] = Field(default_factory=dict)
    include_facets: bool = Field(default=False, alias="includeFacets")

    model_config = {"extra": "forbid", "populate_by_name": True}

    def to_request_body(self) -> Dict[str, Any]:
        """Serialize with wire names; empty filter categories are dropped."""
        body = self.model_dump(by_alias=True, exclude={"filters"})
        filters = {name: values for name, values in self.filters.items() if values}
        if filters:
            body["filters"] = filters
        return body


def build_filters(categories: Dict[str, Optional[List[str]]]) -> Dict[str, List[str]]:
    """
    Keep only filter categories with at least one value.

    Args:
        categories: Filter category -> values (None or empty when unset)

    Returns:
        Filters suitable for SearchQuery.filters
    """
    return {name: list(values) for name, values in categories.items() if values}


@dataclass(frozen=True)
class VersionDescriptor:
    """Addresses an exact file revision by commit."""
    version: str
    version_type: str = "commit"
    version_options: str = "none"

    @classmethod
    def for_change(cls, change_id: Optional[str]) -> Optional["VersionDescriptor"]:
        if not change_id:
            return None
        return cls(version=change_id)

    def as_params(self) -> Dict[str, str]:
        return {
            "versionDescriptor.version": self.version,
            "versionDescriptor.versionType": self.version_type,
            "versionDescriptor.versionOptions": self.version_options,
        }


@dataclass(frozen=True)
class EnrichedContent:
    """Fetched Git item for a search hit."""
    content: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {"content": self.content}


@dataclass(frozen=True)
class EnrichedError:
    """Why a search hit could not be enriched."""
    error: str

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error}


EnrichedResult = Union[EnrichedContent, EnrichedError]


@dataclass
class EnrichmentResponse:
    """Enriched results alongside the untouched search payload."""
    results: List[EnrichedResult] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict)

    def results_as_dicts(self) -> List[Dict[str, Any]]:
        return [result.to_dict() for result in self.results]
