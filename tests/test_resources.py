"""Tests for zentao:// resources and the prompt templates."""

import pytest

from zentao_mcp.exceptions import ArgumentError, ZenTaoError
from zentao_mcp.mcp_server._prompts import PROMPTS, render_prompt
from zentao_mcp.mcp_server._resources import RESOURCES, TEMPLATES, read_resource, resolve


class TestResolve:
    @pytest.mark.parametrize(
        "uri, path",
        [
            ("zentao://products", "/products"),
            ("zentao://user", "/user"),
            ("zentao://user/7", "/users/7"),
            ("zentao://product/3", "/products/3"),
            ("zentao://products/3/stories", "/products/3/stories"),
            ("zentao://projects/4/executions", "/projects/4/executions"),
            ("zentao://executions/9/tasks", "/executions/9/tasks"),
            ("zentao://bug/12", "/bugs/12"),
            ("zentao://bugs/", "/bugs"),
        ],
    )
    def test_known_uris(self, uri, path):
        assert resolve(uri) == path

    @pytest.mark.parametrize(
        "uri", ["zentao://story/abc", "zentao://story/1/extra", "zentao://widgets", "http://x"]
    )
    def test_unknown_uris(self, uri):
        with pytest.raises(ZenTaoError, match="Unknown resource URI"):
            resolve(uri)

    def test_static_and_templates_are_distinct(self):
        assert not any(r.is_template for r in RESOURCES)
        assert all(t.is_template for t in TEMPLATES)


class TestReadResource:
    def test_reads_through_client(self, client):
        client.get.return_value = b'{"products":[]}'
        assert read_resource(client, "zentao://products") == '{"products":[]}'
        client.get.assert_called_once_with("/products")

    def test_failure_wrapped(self, client):
        client.get.side_effect = ZenTaoError("HTTP 403: Forbidden")
        with pytest.raises(ZenTaoError, match="Failed to read zentao://task/5: HTTP 403"):
            read_resource(client, "zentao://task/5")

    def test_no_client(self):
        with pytest.raises(ZenTaoError, match="not configured"):
            read_resource(None, "zentao://users")


class TestPrompts:
    def test_names(self):
        assert [p.name for p in PROMPTS] == ["create_product", "create_story"]

    def test_render_lists_arguments(self):
        title, text = render_prompt("create_story", {"title": "Login", "product": "1"})
        assert title == "Create Story"
        assert text == (
            "Create a user story with the specified details:\n- title: Login\n- product: 1"
        )

    def test_missing_argument(self):
        with pytest.raises(ArgumentError, match="missing required argument: code"):
            render_prompt("create_product", {"name": "Shop"})

    def test_unknown_prompt(self):
        with pytest.raises(ZenTaoError, match="Unknown prompt: nope"):
            render_prompt("nope", {})
