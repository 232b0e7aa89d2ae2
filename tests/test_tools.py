"""Tests for the domain tool tables, driven through the full registry.

Each test calls a tool by name against a MagicMock client and asserts the
single request it produced.
"""

import pytest

from zentao_mcp.exceptions import ZenTaoError
from zentao_mcp.mcp_server import build_registry
from zentao_mcp.mcp_server._tools_auth import APP_LOGIN_MESSAGE, SESSION_LOGIN_MESSAGE


@pytest.fixture
def registry(client):
    return build_registry(client)


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------


class TestAuthTools:
    def test_app_login_sets_credentials_without_network(self, registry, client):
        result = registry.call("zentao_login", {"code": "app1", "key": "secret"})
        assert not result.is_error
        assert result.text == APP_LOGIN_MESSAGE
        client.set_app_credentials.assert_called_once_with("app1", "secret")
        client.get.assert_not_called()
        client.post.assert_not_called()

    def test_app_login_missing_key(self, registry, client):
        result = registry.call("zentao_login", {"code": "app1"})
        assert result.is_error
        assert result.text == "Invalid arguments for zentao_login: missing required parameter: key"
        client.set_app_credentials.assert_not_called()

    def test_only_app_login_registered_for_app_auth(self, registry):
        assert "zentao_login" in registry
        assert "zentao_login_session" not in registry

    def test_session_login(self, client):
        client.auth_method = "session"
        client.is_authenticated.return_value = True
        registry = build_registry(client)
        assert "zentao_login" not in registry
        result = registry.call("zentao_login_session", {"account": "admin", "password": "pw"})
        assert result.text == SESSION_LOGIN_MESSAGE
        client.get_session_id.assert_called_once_with()
        client.login.assert_called_once_with("admin", "pw")

    def test_session_id_failure(self, client):
        client.auth_method = "session"
        client.get_session_id.side_effect = ZenTaoError("Connection failed: refused")
        result = build_registry(client).call(
            "zentao_login_session", {"account": "admin", "password": "pw"}
        )
        assert result.is_error
        assert result.text == "Failed to get session ID: Connection failed: refused"
        client.login.assert_not_called()

    def test_login_failure(self, client):
        client.auth_method = "session"
        client.login.side_effect = ZenTaoError("login failed: bad password")
        result = build_registry(client).call(
            "zentao_login_session", {"account": "admin", "password": "x"}
        )
        assert result.text == "Login failed: login failed: bad password"

    def test_no_auth_tools_for_none_method(self, client):
        client.auth_method = "none"
        registry = build_registry(client)
        assert "zentao_login" not in registry
        assert "zentao_login_session" not in registry


# ---------------------------------------------------------------------------
# REST-style core entities
# ---------------------------------------------------------------------------


class TestRestTools:
    def test_create_bug(self, registry, client):
        client.post.return_value = b'{"id":101}'
        result = registry.call(
            "create_bug",
            {"product": 1, "title": "Crash", "severity": 3, "pri": 2, "type": "codeerror"},
        )
        assert result.text == '{"id":101}'
        client.post.assert_called_once_with(
            "/products/1/bugs",
            {"title": "Crash", "severity": 3, "pri": 2, "type": "codeerror"},
        )

    def test_delete_story(self, registry, client):
        registry.call("delete_story", {"id": 42})
        client.delete.assert_called_once_with("/stories/42")

    def test_delete_plan_path(self, registry, client):
        registry.call("delete_plan", {"id": 9})
        client.delete.assert_called_once_with("/productplans/9")

    def test_create_story_missing_pri(self, registry, client):
        result = registry.call("create_story", {"title": "Login", "product": 1})
        assert result.is_error
        assert result.text == "Invalid arguments for create_story: missing required parameter: pri"
        client.post.assert_not_called()

    def test_create_product(self, registry, client):
        registry.call("create_product", {"name": "Shop", "code": "shop", "acl": "open"})
        client.post.assert_called_once_with(
            "/products", {"name": "Shop", "code": "shop", "acl": "open"}
        )

    def test_create_task_duplicates_start_date(self, registry, client):
        registry.call(
            "create_task",
            {
                "execution": 9,
                "name": "Build login",
                "type": "devel",
                "assignedTo": ["alice"],
                "estStarted": "2024-05-01",
                "deadline": "2024-05-03",
            },
        )
        path, body = client.post.call_args[0]
        assert path == "/executions/9/tasks"
        assert body["estStarted"] == body["openedDate"] == "2024-05-01"
        assert body["assignedTo"] == ["alice"]
        assert "execution" not in body

    def test_enum_values_forwarded_unchanged(self, registry, client):
        registry.call("update_bug", {"id": 5, "type": "not-a-type", "severity": 99})
        client.put.assert_called_once_with("/bugs/5", {"type": "not-a-type", "severity": 99})

    def test_get_user_profile(self, registry, client):
        registry.call("get_my_profile", {})
        client.get.assert_called_once_with("/user")

    def test_user_filters_skip_empty_values(self, registry, client):
        registry.call("get_users", {"account": "", "dept": 0, "limit": 20, "offset": 0})
        client.get.assert_called_once_with("/users?limit=20&offset=0")

    def test_backend_error_wrapped_with_action(self, registry, client):
        client.post.side_effect = ZenTaoError("HTTP 400: Bad Request")
        result = registry.call("create_feedback", {"product": 1, "title": "Slow"})
        assert result.is_error
        assert result.text == "Failed to create feedback: HTTP 400: Bad Request"


# ---------------------------------------------------------------------------
# Legacy index.php endpoints
# ---------------------------------------------------------------------------


class TestLegacyTools:
    def test_get_execution_tasks(self, registry, client):
        registry.call("get_execution_tasks", {"executionID": 7})
        client.get.assert_called_once_with("/index.php?m=execution&f=task&t=json&executionID=7")

    def test_get_execution_tasks_optional_filters(self, registry, client):
        registry.call("get_execution_tasks", {"executionID": 7, "status": "wait", "pageID": 2})
        client.get.assert_called_once_with(
            "/index.php?m=execution&f=task&t=json&executionID=7&status=wait&pageID=2"
        )

    def test_post_with_query_and_empty_body(self, registry, client):
        registry.call("close_requirement", {"storyID": 3})
        client.post.assert_called_once_with("/index.php?m=requirement&f=close&t=json&storyID=3", {})

    def test_move_kanban_card(self, registry, client):
        registry.call(
            "move_kanban_card",
            {
                "cardID": 1,
                "fromColID": 2,
                "toColID": 3,
                "fromLaneID": 4,
                "toLaneID": 5,
                "kanbanID": 6,
            },
        )
        client.post.assert_called_once_with(
            "/index.php?m=kanban&f=moveCard&t=json"
            "&cardID=1&fromColID=2&toColID=3&fromLaneID=4&toLaneID=5&kanbanID=6",
            {},
        )

    def test_delete_testcase_uses_case_id(self, registry, client):
        registry.call("delete_testcase", {"id": 12})
        client.get.assert_called_once_with("/index.php?m=testcase&f=delete&t=json&caseID=12")

    def test_sort_branches_wire_key(self, registry, client):
        registry.call("sort_branches", {"branchOrders": ["3", "1"]})
        client.post.assert_called_once_with(
            "/index.php?m=branch&f=sort&t=json", {"orders": ["3", "1"]}
        )

    def test_boolean_flag(self, registry, client):
        registry.call("execute_prompt", {"promptId": 1, "objectId": 2, "auto": True})
        client.get.assert_called_once_with(
            "/index.php?m=ai&f=promptExecute&t=json&promptId=1&objectId=2&auto=1"
        )

    def test_zanode_lifecycle(self, registry, client):
        client.get.side_effect = ZenTaoError("timeout")
        result = registry.call("reboot_zanode", {"nodeID": 8})
        client.get.assert_called_once_with("/index.php?m=zanode&f=reboot&t=json&nodeID=8")
        assert result.text == "Failed to reboot node: timeout"

    def test_doc_browse_params_sent_as_query(self, registry, client):
        registry.call("doc_browse_template", {"libID": 2, "orderBy": "id_desc"})
        client.get.assert_called_once_with(
            "/index.php?m=doc&f=browseTemplate&t=json&libID=2&orderBy=id_desc"
        )


# ---------------------------------------------------------------------------
# Error prefixes
# ---------------------------------------------------------------------------

_SAMPLE_VALUES = {"number": 1, "string": "x", "boolean": True, "array": [1]}


def _required_args(spec):
    return {p.name: _SAMPLE_VALUES[p.kind] for p in spec.params if p.required}


class TestErrorPrefixes:
    @pytest.mark.parametrize(
        "tool, prefix",
        [
            ("create_testcase", "create test case"),
            ("update_testcase", "update test case"),
            ("delete_testcase", "delete test case"),
            ("view_testcase", "view test case"),
            ("review_testcase", "review test case"),
            ("browse_testcases", "browse test cases"),
            ("batch_create_testcases", "batch create test cases"),
            ("batch_edit_testcases", "batch edit test cases"),
            ("batch_delete_testcases", "batch delete test cases"),
            ("batch_review_testcases", "batch review test cases"),
            ("link_testcases", "link test cases"),
            ("export_testcases", "export test cases"),
            ("import_testcases", "import test cases"),
            ("group_testcases", "group test cases"),
            ("link_bugs_to_testcase", "link bugs to test case"),
            ("create_bug_from_testcase", "create bug from test case"),
            ("get_zero_testcases", "get zero test cases"),
            ("batch_change_testcase_type", "batch change type"),
            ("tree_browse", "browse tree"),
        ],
    )
    def test_action_text(self, registry, client, tool, prefix):
        for verb in (client.get, client.post, client.put, client.delete):
            verb.side_effect = ZenTaoError("boom")
        result = registry.call(tool, _required_args(registry.get(tool)))
        assert result.is_error
        assert result.text == f"Failed to {prefix}: boom"
