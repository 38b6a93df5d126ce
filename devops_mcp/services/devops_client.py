"""
Services - DevOps Client

Authenticated HTTP access to Azure DevOps REST endpoints.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx

from devops_mcp import __version__
from devops_mcp.config import Settings, get_settings
from devops_mcp.exceptions import DevOpsMCPError, RemoteServiceError
from devops_mcp.useragent import UserAgentComposer


logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Awaitable[str]]


class DevOpsClient:
    """Sends bearer-authenticated requests and rejects non-success responses."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        user_agent: Optional[UserAgentComposer] = None,
        token_provider: Optional[TokenProvider] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        if not self.settings.devops.organization:
            raise DevOpsMCPError(
                "Azure DevOps organization is not configured (AZURE_DEVOPS_ORG)"
            )
        self.organization = self.settings.devops.organization
        self.timeout = self.settings.devops.timeout_seconds
        self.user_agent = user_agent or UserAgentComposer(__version__)
        self.token_provider = token_provider or self._settings_token
        self._transport = transport

    async def _settings_token(self) -> str:
        token = self.settings.devops.token
        if not token:
            raise DevOpsMCPError("Azure DevOps token is not configured (AZURE_DEVOPS_TOKEN)")
        return token

    async def request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        service: str = "Azure DevOps",
    ) -> httpx.Response:
        """
        Send a request to Azure DevOps.

        Args:
            method: HTTP method
            url: Absolute endpoint URL
            params: Query parameters
            json: JSON request body
            service: Service name used in error messages

        Returns:
            The successful httpx.Response

        Raises:
            RemoteServiceError: On a non-2xx response
        """
        token = await self.token_provider()
        headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {token}",
            "User-Agent": self.user_agent.user_agent,
        }

        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            response = await client.request(
                method, url, params=params, json=json, headers=headers
            )

        if not response.is_success:
            logger.debug(f"{method} {url} returned {response.status_code}")
            raise RemoteServiceError(
                response.status_code,
                response.reason_phrase,
                url=str(response.request.url),
                service=service,
            )
        return response

    async def get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        service: str = "Azure DevOps",
    ) -> Any:
        response = await self.request("GET", url, params=params, service=service)
        return response.json()

    async def post_json(
        self,
        url: str,
        body: Dict[str, Any],
        params: Optional[Dict[str, Any]] = None,
        service: str = "Azure DevOps",
    ) -> Any:
        response = await self.request("POST", url, params=params, json=body, service=service)
        return response.json()
