"""
Tests for the search tools and server wiring
"""

import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from fastmcp import Client, FastMCP

from devops_mcp.config import get_settings
from devops_mcp.exceptions import NameValidationError, RemoteServiceError
from devops_mcp.schemas import IndexKind, SearchQuery, build_filters
from devops_mcp.server import create_app
from devops_mcp.services import EnrichmentService, FetchService, SearchService
from devops_mcp.tools.names import SEARCH_TOOLS, checked_tool_name
from devops_mcp.tools.search_code import run_search_code
from devops_mcp.tools.search_wiki import run_search_wiki
from devops_mcp.tools.search_workitem import run_search_workitem
from devops_mcp.useragent import UserAgentComposer, note_client

from helpers import code_hit, git_item, json_response


def devops_handler(search_payload, missing_paths=()):
    """Serve the code search endpoint and the Git items endpoint."""
    def handler(request):
        if "/_apis/search/" in request.url.path:
            return json_response(search_payload)
        path = request.url.params["path"]
        if path in missing_paths:
            return httpx.Response(404)
        return json_response(git_item(path))
    return handler


class TestSearchQuery:
    """Tests for SearchQuery."""

    def test_defaults(self):
        query = SearchQuery(search_text="foo")

        assert query.skip == 0
        assert query.top == 5
        assert query.to_request_body() == {
            "searchText": "foo", "$skip": 0, "$top": 5, "includeFacets": False,
        }

    def test_accepts_wire_names(self):
        query = SearchQuery.model_validate({"searchText": "foo", "$top": 5})

        assert query.top == 5

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValueError):
            SearchQuery.model_validate({"searchText": "foo", "orderBy": "x"})

    def test_rejects_negative_paging(self):
        with pytest.raises(ValueError):
            SearchQuery(search_text="foo", skip=-1)

    def test_build_filters_drops_unset(self):
        assert build_filters({"Project": ["A"], "Wiki": None, "Path": []}) == {"Project": ["A"]}

    def test_default_page_sizes(self):
        assert IndexKind.CODE.default_top == 5
        assert IndexKind.WIKI.default_top == 10
        assert IndexKind.WORKITEM.default_top == 10


class TestSearchCodeTool:
    """Tests for search_code."""

    @pytest.mark.asyncio
    async def test_returns_enriched_then_raw(self, make_client):
        hits = [code_hit(n) for n in range(1, 8)]
        del hits[2]["versions"]
        payload = {"count": 7, "results": hits}
        client = make_client(devops_handler(payload))

        blocks = await run_search_code(
            SearchService(client),
            EnrichmentService(FetchService(client)),
            SearchQuery.model_validate({"searchText": "foo", "$top": 5}),
        )

        assert [block.type for block in blocks] == ["text", "text"]
        combined = json.loads(blocks[0].text)
        assert len(combined) == 5
        assert "error" in combined[2]
        assert "Missing projectId, repositoryId, filePath, or changeId" in combined[2]["error"]
        assert [entry["content"]["path"] for entry in combined if "content" in entry] == [
            "/src/file1.py", "/src/file2.py", "/src/file4.py", "/src/file5.py",
        ]
        assert json.loads(blocks[1].text) == payload

    @pytest.mark.asyncio
    async def test_non_object_hit_does_not_abort(self, make_client):
        payload = {"count": 3, "results": [code_hit(1), None, code_hit(3)]}
        client = make_client(devops_handler(payload))

        blocks = await run_search_code(
            SearchService(client),
            EnrichmentService(FetchService(client)),
            SearchQuery(search_text="foo"),
        )

        combined = json.loads(blocks[0].text)
        assert len(combined) == 3
        assert combined[0]["content"]["path"] == "/src/file1.py"
        assert "Missing projectId, repositoryId, filePath, or changeId" in combined[1]["error"]
        assert combined[2]["content"]["path"] == "/src/file3.py"

    @pytest.mark.asyncio
    async def test_all_fetches_failing(self, make_client):
        payload = {"count": 2, "results": [code_hit(1), code_hit(2)]}
        client = make_client(devops_handler(payload, missing_paths={"/src/file1.py", "/src/file2.py"}))

        blocks = await run_search_code(
            SearchService(client),
            EnrichmentService(FetchService(client)),
            SearchQuery(search_text="foo"),
        )

        assert json.loads(blocks[0].text) == [
            {"error": "Azure DevOps Git API error: 404 Not Found"},
            {"error": "Azure DevOps Git API error: 404 Not Found"},
        ]
        assert json.loads(blocks[1].text) == payload

    @pytest.mark.asyncio
    async def test_no_results_field(self, make_client):
        client = make_client(devops_handler({"count": 0}))

        blocks = await run_search_code(
            SearchService(client),
            EnrichmentService(FetchService(client)),
            SearchQuery(search_text="nothing"),
        )

        assert json.loads(blocks[0].text) == []

    @pytest.mark.asyncio
    async def test_search_failure_aborts(self, make_client):
        client = make_client(lambda request: httpx.Response(401))
        enricher = MagicMock(spec=EnrichmentService)
        enricher.enrich_payload = AsyncMock()

        with pytest.raises(RemoteServiceError) as exc_info:
            await run_search_code(SearchService(client), enricher, SearchQuery(search_text="foo"))

        assert exc_info.value.status_code == 401
        enricher.enrich_payload.assert_not_called()


class TestPassthroughTools:
    """Tests for search_wiki and search_workitem."""

    @pytest.mark.asyncio
    async def test_wiki_forwards_raw_payload(self, make_client):
        seen = {}

        def handler(request):
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, text='{"count": 1, "results": [{"fileName": "Home.md"}]}')

        blocks = await run_search_wiki(
            SearchService(make_client(handler)),
            SearchQuery(search_text="setup", top=10, filters={"Wiki": ["Fabrikam.wiki"]}),
        )

        assert len(blocks) == 1
        assert blocks[0].text == '{"count": 1, "results": [{"fileName": "Home.md"}]}'
        assert seen["body"]["filters"] == {"Wiki": ["Fabrikam.wiki"]}

    @pytest.mark.asyncio
    async def test_workitem_forwards_raw_payload(self, make_client):
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            return httpx.Response(200, text='{"count": 0, "results": []}')

        blocks = await run_search_workitem(
            SearchService(make_client(handler)),
            SearchQuery(search_text="bug", filters={"System.State": ["Active"]}),
        )

        assert seen["path"].endswith("/workitemsearchresults")
        assert blocks[0].text == '{"count": 0, "results": []}'


class TestToolRegistration:
    """Tests for tool names and server wiring."""

    def test_tool_names(self):
        assert list(SEARCH_TOOLS.values()) == ["search_code", "search_wiki", "search_workitem"]

    def test_checked_tool_name_rejects_bad_operation_name(self):
        async def tool(search_text: str):
            pass

        with pytest.raises(NameValidationError):
            checked_tool_name("search code", tool)

    def test_checked_tool_name_rejects_bad_field_name(self):
        long_name = "p" * 65
        namespace = {}
        exec(f"async def tool({long_name}: str):\n    pass\n", namespace)

        with pytest.raises(NameValidationError, match="Field name"):
            checked_tool_name("search_code", namespace["tool"])

    def test_create_app(self, settings, make_client):
        mcp = create_app(settings, client=make_client(lambda request: httpx.Response(200)))

        assert isinstance(mcp, FastMCP)

    @pytest.mark.asyncio
    async def test_tool_call_tags_user_agent_with_client(self, settings, make_client):
        seen = []

        def handler(request):
            seen.append(request.headers["User-Agent"])
            return httpx.Response(200, text='{"count": 0, "results": []}')

        mcp = create_app(settings, client=make_client(handler))

        async with Client(mcp) as client:
            tools = {tool.name: tool for tool in await client.list_tools()}
            await client.call_tool("search_wiki", {"search_text": "setup"})
            await client.call_tool("search_workitem", {"search_text": "bug"})

        assert "ctx" not in tools["search_wiki"].inputSchema["properties"]
        assert seen[0].startswith("AzureDevOps.MCP/1.2.3 (local) ")
        assert len(seen[0].split(" ")) == 3
        assert seen[1] == seen[0]

    def test_get_settings_organization_override(self, monkeypatch):
        monkeypatch.setenv("AZURE_DEVOPS_ORG", "from-env")

        assert get_settings().devops.organization == "from-env"
        assert get_settings(organization="contoso").devops.organization == "contoso"
        assert get_settings(organization="contoso").devops.org_url == "https://dev.azure.com/contoso"


class TestUserAgentComposer:
    """Tests for UserAgentComposer."""

    def test_base_user_agent(self):
        assert UserAgentComposer("1.0.0").user_agent == "AzureDevOps.MCP/1.0.0 (local)"

    def test_client_info_appended_once(self):
        composer = UserAgentComposer("1.0.0")

        composer.append_client_info("vscode", "1.99")
        composer.append_client_info("other", "2.0")

        assert composer.user_agent == "AzureDevOps.MCP/1.0.0 (local) vscode/1.99"

    def test_incomplete_client_info_ignored(self):
        composer = UserAgentComposer("1.0.0")

        composer.append_client_info("vscode", None)
        composer.append_client_info("vscode", "1.99")

        assert composer.user_agent == "AzureDevOps.MCP/1.0.0 (local) vscode/1.99"

    def test_note_client_from_session(self):
        composer = UserAgentComposer("1.0.0")
        ctx = MagicMock()
        ctx.session.client_params.clientInfo.name = "claude-desktop"
        ctx.session.client_params.clientInfo.version = "0.9.2"

        note_client(ctx, composer)

        assert composer.user_agent == "AzureDevOps.MCP/1.0.0 (local) claude-desktop/0.9.2"

    def test_note_client_before_initialize(self):
        composer = UserAgentComposer("1.0.0")
        ctx = MagicMock()
        ctx.session.client_params = None

        note_client(ctx, composer)

        assert composer.user_agent == "AzureDevOps.MCP/1.0.0 (local)"
