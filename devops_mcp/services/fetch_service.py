"""
Services - Fetch Service

Fetches the exact file revision referenced by a code search hit from the
Git items endpoint.
"""

from typing import Any, Dict
from urllib.parse import quote

from devops_mcp.schemas.search import VersionDescriptor
from devops_mcp.services.devops_client import DevOpsClient


# Fixed retrieval policy; not exposed to callers.
ITEM_FLAGS = {
    "recursionLevel": "none",
    "includeContentMetadata": "true",
    "latestProcessedChange": "false",
    "download": "false",
    "includeContent": "true",
    "resolveLfs": "true",
    "sanitize": "true",
}

GIT_API_VERSION = "7.1"


class FetchService:
    """Retrieves Git items with full content."""

    def __init__(self, client: DevOpsClient):
        self.client = client
        self.settings = client.settings

    def item_url(self, project_id: str, repository_id: str) -> str:
        return (
            f"{self.settings.devops.org_url}/{quote(project_id, safe='')}"
            f"/_apis/git/repositories/{quote(repository_id, safe='')}/items"
        )

    async def fetch_item(
        self,
        repository_id: str,
        path: str,
        project_id: str,
        version: VersionDescriptor,
    ) -> Dict[str, Any]:
        """
        Fetch a file item at a specific revision.

        Args:
            repository_id: Git repository ID
            path: File path within the repository
            project_id: Project ID
            version: Revision to fetch

        Returns:
            Git item JSON, including ``content``

        Raises:
            RemoteServiceError: If the items endpoint does not return success
            httpx.HTTPError: On transport failures
        """
        params = {
            "path": path,
            **ITEM_FLAGS,
            **version.as_params(),
            "api-version": GIT_API_VERSION,
        }
        return await self.client.get_json(
            self.item_url(project_id, repository_id),
            params=params,
            service="Azure DevOps Git",
        )
