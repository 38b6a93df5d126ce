"""
DevOps MCP Server - Main Entry Point

FastMCP server with STDIO and SSE transport support.
"""

import argparse
import logging
from typing import Optional, Sequence

from fastmcp import FastMCP

from devops_mcp import __version__
from devops_mcp.config import Settings, get_settings
from devops_mcp.logging_config import configure_logging
from devops_mcp.services import DevOpsClient, EnrichmentService, FetchService, SearchService
from devops_mcp.tools import search_code, search_wiki, search_workitem
from devops_mcp.useragent import UserAgentComposer


logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[DevOpsClient] = None,
    enable_search_tools: bool = True,
) -> FastMCP:
    """Create and configure the MCP application."""
    settings = settings or get_settings()
    client = client or DevOpsClient(settings, user_agent=UserAgentComposer(__version__))

    mcp = FastMCP(
        name="Azure DevOps MCP Server",
        instructions="Search Azure DevOps code, wikis and work items",
    )

    if enable_search_tools:
        search = SearchService(client)
        enricher = EnrichmentService(FetchService(client))

        search_code.register(mcp, search, enricher)
        search_wiki.register(mcp, search)
        search_workitem.register(mcp, search)

    return mcp


def main(argv: Optional[Sequence[str]] = None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Azure DevOps MCP Server")
    parser.add_argument(
        "organization",
        nargs="?",
        default=None,
        help="Azure DevOps organization name (default: AZURE_DEVOPS_ORG)"
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=None,
        help="Transport protocol (default: from env)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for SSE transport (default: from env)"
    )
    parser.add_argument(
        "--disable-search-tools",
        action="store_true",
        help="Do not register the search tools"
    )
    args = parser.parse_args(argv)

    settings = get_settings(organization=args.organization)
    configure_logging(settings.log)

    if not settings.devops.organization:
        parser.error("an organization name is required (argument or AZURE_DEVOPS_ORG)")

    transport = args.transport or settings.mcp.transport
    port = args.port or settings.mcp.port

    mcp = create_app(settings, enable_search_tools=not args.disable_search_tools)
    logger.info(
        f"Azure DevOps MCP Server version {__version__} "
        f"for organization {settings.devops.organization}"
    )

    if transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(transport="sse", host=settings.mcp.host, port=port)


if __name__ == "__main__":
    main()
