"""
Azure DevOps MCP Server

Search over Azure DevOps code, wikis and work items for MCP clients, with
code hits enriched by their file content.
"""

__version__ = "0.1.0"
