"""Tests for cli.py: global flags, argparse, command dispatch."""

import json
from unittest.mock import patch

import pytest

from zentao_mcp import config
from zentao_mcp.cli import _emit_error, _extract_global_flags, build_parser, main
from zentao_mcp.exceptions import SetupError, ZenTaoError
from zentao_mcp.mcp_server import build_registry

# ---------------------------------------------------------------------------
# _extract_global_flags
# ---------------------------------------------------------------------------


class TestExtractGlobalFlags:
    def test_no_flags(self):
        assert _extract_global_flags(["tools"]) == ("json", False, ["tools"])

    def test_format_after_command(self):
        fmt, verbose, remaining = _extract_global_flags(["tools", "--format", "table"])
        assert fmt == "table"
        assert remaining == ["tools"]

    def test_verbose_anywhere(self):
        fmt, verbose, remaining = _extract_global_flags(["call", "-v", "get_bug", '{"id":1}'])
        assert verbose is True
        assert remaining == ["call", "get_bug", '{"id":1}']

    def test_version_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _extract_global_flags(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == f"zentao-mcp {config.VERSION}"

    def test_invalid_format(self):
        with pytest.raises(ZenTaoError, match="Invalid format 'csv'"):
            _extract_global_flags(["--format", "csv", "tools"])


class TestBuildParser:
    def test_call_defaults_to_empty_object(self):
        ns = build_parser().parse_args(["call", "get_my_profile"])
        assert ns.tool == "get_my_profile"
        assert ns.json_args == "{}"

    def test_configure_auth_choices(self):
        with pytest.raises(ZenTaoError):
            build_parser().parse_args(["configure", "--auth-method", "oauth"])

    def test_unknown_command(self):
        with pytest.raises(ZenTaoError, match=r"\[ERROR\]"):
            build_parser().parse_args(["explode"])


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@pytest.fixture
def registry(client):
    registry = build_registry(client)
    with patch("zentao_mcp.cli._registry", return_value=registry):
        yield registry


class TestCommands:
    def test_no_command_runs_server(self):
        with patch("zentao_mcp.mcp_server.main") as serve:
            main([])
        serve.assert_called_once_with()

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        assert "Usage: zentao-mcp" in capsys.readouterr().out

    def test_tools_json(self, registry, capsys):
        main(["tools", "--search", "kanban_card"])
        rows = json.loads(capsys.readouterr().out)
        assert rows
        assert all("kanban_card" in r["name"] for r in rows)

    def test_tools_table(self, registry, capsys):
        main(["tools", "--format", "table"])
        out = capsys.readouterr().out
        assert out.startswith("Tool")
        assert f"Total: {len(registry)} tools" in out

    def test_schema(self, registry, capsys):
        main(["schema", "delete_story"])
        data = json.loads(capsys.readouterr().out)
        assert data["inputSchema"]["required"] == ["id"]

    def test_call_pretty_prints_json(self, registry, client, capsys):
        client.delete.return_value = b'{"result":"success"}'
        main(["call", "delete_story", '{"id": 42}'])
        assert json.loads(capsys.readouterr().out) == {"result": "success"}
        client.delete.assert_called_once_with("/stories/42")

    def test_call_failure_exits_nonzero(self, registry, client, capsys):
        client.get.side_effect = ZenTaoError("Connection failed: refused")
        with pytest.raises(SystemExit) as exc_info:
            main(["call", "get_bug", '{"id": 1}'])
        assert exc_info.value.code == 1
        err = json.loads(capsys.readouterr().err)
        assert err["ok"] is False
        assert err["error"]["message"] == "Failed to get bug: Connection failed: refused"

    def test_call_rejects_non_finite_number(self, registry, client, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["call", "get_bug", '{"id": 1e400}'])
        assert exc_info.value.code == 1
        err = json.loads(capsys.readouterr().err)
        assert err["error"]["type"] == "ZenTaoError"
        assert "parameter id must be a finite number" in err["error"]["message"]
        client.get.assert_not_called()

    def test_call_rejects_non_object(self, registry, capsys):
        with pytest.raises(SystemExit):
            main(["call", "get_bug", "[1]"])
        assert "JSON object" in capsys.readouterr().err

    def test_resources_table(self, capsys):
        main(["resources", "--format", "table"])
        assert "zentao://products" in capsys.readouterr().out

    def test_configure_writes_env(self, capsys):
        main(["configure", "--base-url", "http://pm.example", "--auth-method", "session"])
        with open(config.ENV_PATH) as f:
            content = f.read()
        assert "ZENTAO_BASE_URL=http://pm.example\n" in content
        assert "ZENTAO_AUTH_METHOD=session\n" in content

    def test_configure_nothing(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["configure"])
        assert exc_info.value.code == SetupError.exit_code


class TestEmitError:
    def test_table_format_plain_text(self, capsys):
        _emit_error(ZenTaoError("boom"), "table")
        assert capsys.readouterr().err.strip() == "boom"
