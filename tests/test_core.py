"""Tests for the tool engine: parameter routing, request building, dispatch."""

from unittest.mock import MagicMock

import pytest

from zentao_mcp.exceptions import ArgumentError, ZenTaoError
from zentao_mcp.mcp_server._core import (
    BODY,
    PATH,
    QUERY,
    Request,
    ToolResult,
    ToolSpec,
    array,
    boolean,
    build_request,
    legacy,
    number,
    run_tool,
    send,
    string,
)


class TestParamTargets:
    def test_placeholder_goes_to_path(self):
        spec = ToolSpec("t", "d", method="PUT", path="/bugs/{id}", params=(number("id"),))
        assert spec.params[0].targets(spec) == (PATH,)

    def test_get_defaults_to_query(self):
        spec = ToolSpec("t", "d", path="/bugs", params=(string("status"),))
        assert spec.params[0].targets(spec) == (QUERY,)

    def test_post_defaults_to_body(self):
        spec = ToolSpec("t", "d", method="POST", path="/bugs", params=(string("title"),))
        assert spec.params[0].targets(spec) == (BODY,)

    def test_tool_level_default(self):
        spec = ToolSpec("t", "d", method="POST", path="/x", into=QUERY, params=(string("a"),))
        assert spec.params[0].targets(spec) == (QUERY,)
        assert not spec.has_body

    def test_explicit_override_wins(self):
        spec = ToolSpec(
            "t", "d", method="POST", path="/x", into=QUERY, params=(array("m", into=BODY),)
        )
        assert spec.params[0].targets(spec) == (BODY,)
        assert spec.has_body


class TestInputSchema:
    def test_properties_and_required(self):
        spec = ToolSpec(
            "t",
            "d",
            params=(
                number("id", "Bug ID", required=True),
                string("type", "Type", enum=("a", "b")),
                array("ids", "IDs", items="number"),
                boolean("auto", "Auto"),
            ),
        )
        schema = spec.input_schema()
        assert schema["type"] == "object"
        assert schema["required"] == ["id"]
        assert schema["properties"]["id"] == {"type": "number", "description": "Bug ID"}
        assert schema["properties"]["type"]["enum"] == ["a", "b"]
        assert schema["properties"]["ids"]["items"] == {"type": "number"}
        assert schema["properties"]["auto"]["type"] == "boolean"

    def test_no_required_key_when_all_optional(self):
        assert "required" not in ToolSpec("t", "d", params=(string("q"),)).input_schema()


class TestBuildRequest:
    def test_numbers_truncate_to_int(self):
        spec = ToolSpec("t", "d", path="/bugs/{id}", params=(number("id"),))
        assert build_request(spec, {"id": 42.9}).path == "/bugs/42"

    def test_float_converter_keeps_fraction(self):
        params = (number("estimate", to="float"),)
        spec = ToolSpec("t", "d", method="POST", path="/x", params=params)
        assert build_request(spec, {"estimate": 1.5}).body == {"estimate": 1.5}

    def test_float_converter_widens_ints(self):
        params = (number("estimate", to="float"),)
        spec = ToolSpec("t", "d", method="POST", path="/x", params=params)
        body = build_request(spec, {"estimate": 2}).body
        assert body == {"estimate": 2.0}
        assert isinstance(body["estimate"], float)

    def test_absent_optionals_omitted(self):
        spec = ToolSpec("t", "d", path="/x", params=(string("a"), string("b")))
        assert build_request(spec, {"b": "2"}).path == "/x?b=2"

    def test_query_appended_to_legacy_path(self):
        spec = ToolSpec("t", "d", path=legacy("execution", "task"), params=(number("executionID"),))
        req = build_request(spec, {"executionID": 7})
        assert req.path == "/index.php?m=execution&f=task&t=json&executionID=7"

    def test_query_values_are_encoded(self):
        spec = ToolSpec("t", "d", path="/x", params=(string("q"),))
        assert build_request(spec, {"q": "a b&c"}).path == "/x?q=a+b%26c"

    def test_array_in_query_joined(self):
        spec = ToolSpec("t", "d", path="/x", params=(array("ids"),))
        assert build_request(spec, {"ids": [1, 2]}).path == "/x?ids=1%2C2"

    def test_declaration_order_is_stable(self):
        spec = ToolSpec("t", "d", path="/x", params=(string("b"), string("a")))
        assert build_request(spec, {"a": "1", "b": "2"}).path == "/x?b=2&a=1"

    def test_key_overrides_and_fans_out(self):
        spec = ToolSpec(
            "t",
            "d",
            method="POST",
            path="/x",
            params=(string("start", key=("estStarted", "openedDate")),),
        )
        assert build_request(spec, {"start": "2024-01-01"}).body == {
            "estStarted": "2024-01-01",
            "openedDate": "2024-01-01",
        }

    def test_query_and_body_together(self):
        spec = ToolSpec(
            "t", "d", method="POST", path="/x", params=(number("id", into=(QUERY, BODY)),)
        )
        req = build_request(spec, {"id": 3})
        assert req.path == "/x?id=3"
        assert req.body == {"id": 3}

    def test_fixed_body_always_sent(self):
        spec = ToolSpec(
            "t", "d", method="POST", path="/x", into=QUERY, fixed_body={}, params=(number("id"),)
        )
        assert build_request(spec, {"id": 1}) == Request("POST", "/x?id=1", {})

    def test_fixed_body_is_copied(self):
        fixed = {"openedBy": 1}
        spec = ToolSpec("t", "d", method="POST", path="/x", fixed_body=fixed, params=(string("n"),))
        build_request(spec, {"n": "x"})
        assert fixed == {"openedBy": 1}

    def test_get_without_params_has_no_body(self):
        assert build_request(ToolSpec("t", "d", path="/x"), None) == Request("GET", "/x", None)

    def test_flag_converter(self):
        spec = ToolSpec("t", "d", path="/x", params=(boolean("auto", to="flag"),))
        assert build_request(spec, {"auto": True}).path == "/x?auto=1"
        assert build_request(spec, {"auto": False}).path == "/x?auto=0"

    def test_ints_converter(self):
        spec = ToolSpec("t", "d", method="POST", path="/x", params=(array("ids", to="ints"),))
        assert build_request(spec, {"ids": [1.0, 2.7]}).body == {"ids": [1, 2]}

    @pytest.mark.parametrize(
        "when, value, included",
        [
            ("positive", 0, False),
            ("positive", 3, True),
            ("non_negative", 0, True),
            ("non_empty", "", False),
            ("priority", 10, False),
            ("priority", 9, True),
        ],
    )
    def test_inclusion_predicates(self, when, value, included):
        kind = string if isinstance(value, str) else number
        spec = ToolSpec("t", "d", path="/x", params=(kind("v", when=when),))
        assert ("?" in build_request(spec, {"v": value}).path) is included

    def test_missing_required(self):
        spec = ToolSpec("t", "d", path="/x", params=(string("a", required=True),))
        with pytest.raises(ArgumentError, match="missing required parameter: a"):
            build_request(spec, {})

    def test_null_required_is_missing(self):
        spec = ToolSpec("t", "d", path="/x", params=(string("a", required=True),))
        with pytest.raises(ArgumentError, match="missing required parameter: a"):
            build_request(spec, {"a": None})

    @pytest.mark.parametrize(
        "param, value",
        [(number("v"), "3"), (number("v"), True), (string("v"), 3), (array("v"), "a,b")],
    )
    def test_wrong_type(self, param, value):
        spec = ToolSpec("t", "d", path="/x", params=(param,))
        with pytest.raises(ArgumentError, match=f"must be a {param.kind}"):
            build_request(spec, {"v": value})


    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_number(self, value):
        spec = ToolSpec("t", "d", path="/bugs/{id}", params=(number("id", required=True),))
        with pytest.raises(ArgumentError, match="parameter id must be a finite number"):
            build_request(spec, {"id": value})


class TestSend:
    @pytest.mark.parametrize("method", ["GET", "POST", "PUT", "DELETE"])
    def test_dispatches_to_matching_verb(self, client, method):
        send(client, Request(method, "/x", {} if method in ("POST", "PUT") else None))
        getattr(client, method.lower()).assert_called_once()

    def test_delete_never_sends_body(self, client):
        send(client, Request("DELETE", "/stories/42"))
        client.delete.assert_called_once_with("/stories/42")

    def test_unsupported_method(self, client):
        with pytest.raises(ZenTaoError, match="unsupported method: PATCH"):
            send(client, Request("PATCH", "/x"))


class TestRunTool:
    SPEC = ToolSpec(
        "create_thing", "d", method="POST", path="/things", params=(string("title", required=True),)
    )

    def test_success_passes_body_through(self, client):
        client.post.return_value = '{"id":5,"title":"中文"}'.encode()
        result = run_tool(self.SPEC, client, {"title": "T"})
        assert result == ToolResult('{"id":5,"title":"中文"}')
        client.post.assert_called_once_with("/things", {"title": "T"})

    def test_invalid_utf8_replaced(self, client):
        client.post.return_value = b"\xff"
        assert run_tool(self.SPEC, client, {"title": "T"}).text == "�"

    def test_transport_error_wrapped(self, client):
        client.post.side_effect = ZenTaoError("HTTP 500: Internal Server Error")
        result = run_tool(self.SPEC, client, {"title": "T"})
        assert result.is_error
        assert result.text == "Failed to create thing: HTTP 500: Internal Server Error"

    def test_custom_action_text(self, client):
        spec = ToolSpec("get_user_profile", "d", path="/user", action="get user profile")
        client.get.side_effect = ZenTaoError("boom")
        assert run_tool(spec, client, {}).text == "Failed to get user profile: boom"

    def test_invalid_arguments_make_no_call(self, client):
        result = run_tool(self.SPEC, client, {})
        assert result.is_error
        assert result.text == (
            "Invalid arguments for create_thing: missing required parameter: title"
        )
        client.post.assert_not_called()

    def test_non_finite_number_is_error_result(self, client):
        spec = ToolSpec("get_bug", "d", path="/bugs/{id}", params=(number("id", required=True),))
        result = run_tool(spec, client, {"id": float("inf")})
        assert result.is_error
        assert result.text == "Invalid arguments for get_bug: parameter id must be a finite number"
        client.get.assert_not_called()

    def test_no_client(self):
        result = run_tool(self.SPEC, None, {"title": "T"})
        assert result.is_error
        assert "not configured" in result.text

    def test_handler_bypasses_request_building(self):
        handler = MagicMock(return_value=ToolResult("ok"))
        spec = ToolSpec("custom", "d", handler=handler)
        assert run_tool(spec, "client", None) == ToolResult("ok")
        handler.assert_called_once_with("client", {})
