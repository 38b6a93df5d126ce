"""
MCP Tool - search_workitem

Search Azure DevOps work items.
"""

from typing import Annotated, List, Optional

from fastmcp import Context, FastMCP
from mcp.types import TextContent
from pydantic import Field

from devops_mcp.schemas import IndexKind, SearchQuery, build_filters
from devops_mcp.services import SearchService
from devops_mcp.tools.names import SEARCH_TOOLS, checked_tool_name
from devops_mcp.useragent import note_client


async def run_search_workitem(search: SearchService, query: SearchQuery) -> List[TextContent]:
    """Forward the raw work item search payload."""
    payload_text = await search.search_text(query, IndexKind.WORKITEM)
    return [TextContent(type="text", text=payload_text)]


def register(mcp: FastMCP, search: SearchService) -> None:
    """Register search_workitem on the server."""

    async def search_workitem(
        ctx: Context,
        search_text: Annotated[str, Field(description="Search text to find in work items")],
        project: Annotated[Optional[List[str]], Field(description="Filter by projects")] = None,
        area_path: Annotated[Optional[List[str]], Field(description="Filter by area paths")] = None,
        work_item_type: Annotated[Optional[List[str]], Field(description="Filter by work item types")] = None,
        state: Annotated[Optional[List[str]], Field(description="Filter by work item states")] = None,
        assigned_to: Annotated[Optional[List[str]], Field(description="Filter by assigned to users")] = None,
        include_facets: Annotated[bool, Field(description="Include facets in the search results")] = False,
        skip: Annotated[int, Field(ge=0, description="Number of results to skip for pagination")] = 0,
        top: Annotated[int, Field(ge=0, description="Number of results to return")] = IndexKind.WORKITEM.default_top,
    ):
        """Get Azure DevOps Work Item search results for a given search text."""
        note_client(ctx, search.client.user_agent)
        query = SearchQuery(
            search_text=search_text,
            skip=skip,
            top=top,
            include_facets=include_facets,
            filters=build_filters({
                "System.TeamProject": project,
                "System.AreaPath": area_path,
                "System.WorkItemType": work_item_type,
                "System.State": state,
                "System.AssignedTo": assigned_to,
            }),
        )
        return await run_search_workitem(search, query)

    mcp.tool(name=checked_tool_name(SEARCH_TOOLS["search_workitem"], search_workitem))(search_workitem)
