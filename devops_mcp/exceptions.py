"""Exceptions raised by the DevOps MCP server."""

import json
from typing import Any, Dict, Optional


class DevOpsMCPError(Exception):
    """Base class for all server errors."""

    pass


class NameValidationError(DevOpsMCPError):
    """An operation or field name does not conform to the naming grammar."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class RemoteServiceError(DevOpsMCPError):
    """A remote Azure DevOps endpoint returned a non-success status."""

    def __init__(
        self,
        status_code: int,
        status_text: str,
        url: Optional[str] = None,
        service: str = "Azure DevOps",
    ):
        super().__init__(f"{service} API error: {status_code} {status_text}")
        self.status_code = status_code
        self.status_text = status_text
        self.url = url


class MalformedHitError(DevOpsMCPError):
    """A search hit lacks the fields needed to address its file revision."""

    def __init__(self, hit: Dict[str, Any]):
        super().__init__(
            "Missing projectId, repositoryId, filePath, or changeId in the result: "
            f"{json.dumps(hit, default=str)}"
        )
        self.hit = hit
