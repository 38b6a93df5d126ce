"""User-Agent header composition for outgoing Azure DevOps requests."""

from typing import Any, Optional


class UserAgentComposer:
    """Builds the User-Agent string, optionally tagged with the MCP client."""

    def __init__(self, package_version: str):
        self._user_agent = f"AzureDevOps.MCP/{package_version} (local)"
        self._client_info_appended = False

    @property
    def user_agent(self) -> str:
        return self._user_agent

    def append_client_info(self, name: Optional[str], version: Optional[str]) -> None:
        """Append ``name/version`` of the connected client, once."""
        if self._client_info_appended or not name or not version:
            return
        self._user_agent += f" {name}/{version}"
        self._client_info_appended = True


def note_client(ctx: Any, composer: UserAgentComposer) -> None:
    """Tag ``composer`` with the client that opened the MCP session behind ``ctx``."""
    params = getattr(getattr(ctx, "session", None), "client_params", None)
    info = getattr(params, "clientInfo", None)
    if info is not None:
        composer.append_client_info(info.name, info.version)
