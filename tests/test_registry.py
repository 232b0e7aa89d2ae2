"""Tests for ToolRegistry and the composed domain registry."""

import re

import pytest

from zentao_mcp.mcp_server import DOMAIN_MODULES, build_registry
from zentao_mcp.mcp_server._core import ToolSpec, string
from zentao_mcp.mcp_server._registry import ToolRegistry


class _CountingRegistry(ToolRegistry):
    def __init__(self, client=None):
        super().__init__(client)
        self.added = []

    def add(self, spec):
        self.added.append(spec.name)
        return super().add(spec)


class TestToolRegistry:
    def test_add_and_lookup(self):
        registry = ToolRegistry()
        spec = registry.add(ToolSpec("ping", "Ping", path="/ping"))
        assert registry.get("ping") is spec
        assert "ping" in registry
        assert len(registry) == 1
        assert registry.names() == ["ping"]

    def test_duplicate_name_overwrites(self):
        registry = ToolRegistry()
        registry.add(ToolSpec("ping", "first"))
        registry.add(ToolSpec("ping", "second"))
        assert len(registry) == 1
        assert registry.get("ping").description == "second"

    def test_unknown_tool(self):
        result = ToolRegistry().call("nope", {})
        assert result.is_error
        assert result.text == "Unknown tool: nope"

    def test_call_runs_against_bound_client(self, client):
        registry = ToolRegistry(client)
        registry.add(ToolSpec("list_x", "d", path="/x", params=(string("q"),)))
        registry.call("list_x", {"q": "a"})
        client.get.assert_called_once_with("/x?q=a")


class TestBuildRegistry:
    def test_without_client_registers_data_tools(self):
        registry = build_registry(None)
        assert len(registry) > 250
        assert "create_bug" in registry
        assert "zentao_login" not in registry

    def test_data_tool_without_client_reports_error(self):
        result = build_registry(None).call("get_bug", {"id": 1})
        assert result.is_error
        assert result.text.startswith("Failed to get bug")

    def test_no_duplicate_names_across_modules(self, client):
        registry = _CountingRegistry(client)
        for module in DOMAIN_MODULES:
            module.register(registry)
        assert len(registry.added) == len(set(registry.added)) == len(registry)

    def test_registration_makes_no_requests(self, client):
        build_registry(client)
        for verb in ("get", "post", "put", "delete"):
            getattr(client, verb).assert_not_called()

    @pytest.mark.parametrize(
        "name",
        [
            "create_product",
            "create_project",
            "browse_execution",
            "get_story",
            "get_task",
            "get_bug",
            "view_build",
            "create_plan",
            "browse_designs",
            "view_requirement",
            "view_testcase",
            "create_ticket",
            "create_feedback",
            "get_kanban_spaces",
            "doc_browse_template",
            "get_prompts",
            "tree_browse",
            "get_user",
            "get_branches",
            "start_zanode",
            "get_project_releases",
            "create_testtask",
        ],
    )
    def test_every_domain_contributes(self, name):
        assert name in build_registry(None)

    def test_every_spec_is_well_formed(self):
        for spec in build_registry(None).specs():
            assert re.fullmatch(r"[a-z][a-z0-9_]*", spec.name), spec.name
            assert spec.description
            assert spec.method in ("GET", "POST", "PUT", "DELETE")
            names = [p.name for p in spec.params]
            assert len(names) == len(set(names)), spec.name
            for placeholder in re.findall(r"\{(\w+)\}", spec.path):
                assert placeholder in names, spec.name
            schema = spec.input_schema()
            assert set(schema.get("required", [])) <= set(schema["properties"])
