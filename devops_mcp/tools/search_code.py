"""
MCP Tool - search_code

Search Azure DevOps repositories and return the matching file contents.
"""

import json
from typing import Annotated, List, Optional

from fastmcp import Context, FastMCP
from mcp.types import TextContent
from pydantic import Field

from devops_mcp.schemas import IndexKind, SearchQuery, build_filters
from devops_mcp.services import EnrichmentService, SearchService
from devops_mcp.tools.names import SEARCH_TOOLS, checked_tool_name
from devops_mcp.useragent import note_client


async def run_search_code(
    search: SearchService,
    enricher: EnrichmentService,
    query: SearchQuery,
) -> List[TextContent]:
    """
    Search code and hydrate the top hits with their file content.

    Returns:
        Two text blocks: the enriched results, then the raw search payload
    """
    payload_text = await search.search_text(query, IndexKind.CODE)
    response = await enricher.enrich_payload(json.loads(payload_text), query.top)

    return [
        TextContent(type="text", text=json.dumps(response.results_as_dicts())),
        TextContent(type="text", text=payload_text),
    ]


def register(mcp: FastMCP, search: SearchService, enricher: EnrichmentService) -> None:
    """Register search_code on the server."""

    async def search_code(
        ctx: Context,
        search_text: Annotated[str, Field(description="Keywords to search for in code repositories")],
        project: Annotated[Optional[List[str]], Field(description="Filter by projects")] = None,
        repository: Annotated[Optional[List[str]], Field(description="Filter by repositories")] = None,
        path: Annotated[Optional[List[str]], Field(description="Filter by paths")] = None,
        branch: Annotated[Optional[List[str]], Field(description="Filter by branches")] = None,
        code_element: Annotated[Optional[List[str]], Field(description="Filter by code element types (class, method, ...)")] = None,
        include_facets: Annotated[bool, Field(description="Include facets in the search results")] = False,
        skip: Annotated[int, Field(ge=0, description="Number of results to skip")] = 0,
        top: Annotated[int, Field(ge=0, description="Maximum number of results to return")] = IndexKind.CODE.default_top,
    ):
        """
        Search Azure DevOps Repositories for a given search text.

        Returns the enriched results (file content per hit, or a per-hit
        error) followed by the raw search response.
        """
        note_client(ctx, search.client.user_agent)
        query = SearchQuery(
            search_text=search_text,
            skip=skip,
            top=top,
            include_facets=include_facets,
            filters=build_filters({
                "Project": project,
                "Repository": repository,
                "Path": path,
                "Branch": branch,
                "CodeElement": code_element,
            }),
        )
        return await run_search_code(search, enricher, query)

    mcp.tool(name=checked_tool_name(SEARCH_TOOLS["search_code"], search_code))(search_code)
