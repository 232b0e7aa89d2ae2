"""Tests for the MCP server wiring.

Drives the low-level server's request handlers directly with a MagicMock
client; no stdio transport is started.
"""

import asyncio

import pytest

pytest.importorskip("mcp", reason="mcp package not installed")

import mcp.types as types  # noqa: E402

from zentao_mcp import config  # noqa: E402
from zentao_mcp.exceptions import ZenTaoError  # noqa: E402
from zentao_mcp.mcp_server import build_registry  # noqa: E402
from zentao_mcp.mcp_server._server import build_server, create_client  # noqa: E402


def _handle(server, request):
    handler = server.request_handlers[type(request)]
    return asyncio.run(handler(request)).root


@pytest.fixture
def server(client):
    return build_server(build_registry(client))


def _call(server, name, arguments):
    return _handle(
        server,
        types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name=name, arguments=arguments),
        ),
    )


class TestTools:
    def test_list_tools_exposes_schemas(self, server):
        result = _handle(server, types.ListToolsRequest(method="tools/list"))
        tools = {t.name: t for t in result.tools}
        assert "create_bug" in tools
        schema = tools["create_bug"].inputSchema
        assert schema["required"] == ["product", "title", "severity", "pri", "type"]
        assert "codeerror" in schema["properties"]["type"]["enum"]

    def test_call_returns_raw_text(self, server, client):
        client.delete.return_value = b'{"result":"success"}'
        result = _call(server, "delete_story", {"id": 42})
        assert not result.isError
        assert result.content[0].text == '{"result":"success"}'
        client.delete.assert_called_once_with("/stories/42")

    def test_backend_failure_is_error_result(self, server, client):
        client.post.side_effect = ZenTaoError("HTTP 500: Internal Server Error")
        result = _call(
            server,
            "create_bug",
            {"product": 1, "title": "T", "severity": 3, "pri": 2, "type": "codeerror"},
        )
        assert result.isError
        assert result.content[0].text == "Failed to create bug: HTTP 500: Internal Server Error"

    def test_missing_argument_is_error_result(self, server, client):
        result = _call(server, "create_story", {"title": "Login", "product": 1})
        assert result.isError
        assert result.content[0].text == (
            "Invalid arguments for create_story: missing required parameter: pri"
        )
        client.post.assert_not_called()

    def test_unknown_tool(self, server):
        result = _call(server, "nope", {})
        assert result.isError
        assert "Unknown tool: nope" in result.content[0].text


class TestResourcesAndPrompts:
    def test_list_resources(self, server):
        result = _handle(server, types.ListResourcesRequest(method="resources/list"))
        uris = [str(r.uri) for r in result.resources]
        assert "zentao://products" in uris
        assert all(r.mimeType == "application/json" for r in result.resources)

    def test_list_templates(self, server):
        result = _handle(
            server, types.ListResourceTemplatesRequest(method="resources/templates/list")
        )
        assert "zentao://story/{id}" in [t.uriTemplate for t in result.resourceTemplates]

    def test_read_resource(self, server, client):
        client.get.return_value = b'{"id":3}'
        result = _handle(
            server,
            types.ReadResourceRequest(
                method="resources/read",
                params=types.ReadResourceRequestParams(uri="zentao://story/3"),
            ),
        )
        assert result.contents[0].text == '{"id":3}'
        client.get.assert_called_once_with("/stories/3")

    def test_prompts(self, server):
        listed = _handle(server, types.ListPromptsRequest(method="prompts/list"))
        assert [p.name for p in listed.prompts] == ["create_product", "create_story"]
        result = _handle(
            server,
            types.GetPromptRequest(
                method="prompts/get",
                params=types.GetPromptRequestParams(
                    name="create_product", arguments={"name": "Shop", "code": "shop"}
                ),
            ),
        )
        assert result.description == "Create Product"
        assert "- code: shop" in result.messages[0].content.text


class TestCreateClient:
    def test_uses_config(self, monkeypatch):
        monkeypatch.setattr(config, "BASE_URL", "http://pm.example")
        monkeypatch.setattr(config, "AUTH_METHOD", "session")
        client = create_client()
        assert client.base_url == "http://pm.example"
        assert client.auth_method == "session"
