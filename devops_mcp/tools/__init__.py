"""
Tools Module - MCP Tool Implementations

Search tools for Azure DevOps code, wiki and work items.
"""

from devops_mcp.tools.names import SEARCH_TOOLS
from devops_mcp.tools import search_code
from devops_mcp.tools import search_wiki
from devops_mcp.tools import search_workitem

__all__ = [
    "SEARCH_TOOLS",
    "search_code",
    "search_wiki",
    "search_workitem",
]
