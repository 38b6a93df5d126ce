"""
MCP Tool - search_wiki

Search Azure DevOps wiki pages.
"""

from typing import Annotated, List, Optional

from fastmcp import Context, FastMCP
from mcp.types import TextContent
from pydantic import Field

from devops_mcp.schemas import IndexKind, SearchQuery, build_filters
from devops_mcp.services import SearchService
from devops_mcp.tools.names import SEARCH_TOOLS, checked_tool_name
from devops_mcp.useragent import note_client


async def run_search_wiki(search: SearchService, query: SearchQuery) -> List[TextContent]:
    """Forward the raw wiki search payload."""
    payload_text = await search.search_text(query, IndexKind.WIKI)
    return [TextContent(type="text", text=payload_text)]


def register(mcp: FastMCP, search: SearchService) -> None:
    """Register search_wiki on the server."""

    async def search_wiki(
        ctx: Context,
        search_text: Annotated[str, Field(description="Keywords to search for wiki pages")],
        project: Annotated[Optional[List[str]], Field(description="Filter by projects")] = None,
        wiki: Annotated[Optional[List[str]], Field(description="Filter by wiki names")] = None,
        include_facets: Annotated[bool, Field(description="Include facets in the search results")] = False,
        skip: Annotated[int, Field(ge=0, description="Number of results to skip")] = 0,
        top: Annotated[int, Field(ge=0, description="Maximum number of results to return")] = IndexKind.WIKI.default_top,
    ):
        """Search Azure DevOps Wiki for a given search text."""
        note_client(ctx, search.client.user_agent)
        query = SearchQuery(
            search_text=search_text,
            skip=skip,
            top=top,
            include_facets=include_facets,
            filters=build_filters({"Project": project, "Wiki": wiki}),
        )
        return await run_search_wiki(search, query)

    mcp.tool(name=checked_tool_name(SEARCH_TOOLS["search_wiki"], search_wiki))(search_wiki)
