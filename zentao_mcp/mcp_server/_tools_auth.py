"""Authentication tools: install app credentials or open a login session.

Which tool is registered depends on the client's configured auth method;
neither is registered when there is no client.
"""

from __future__ import annotations

from zentao_mcp.api import _log_event
from zentao_mcp.client import AUTH_APP, AUTH_SESSION
from zentao_mcp.exceptions import ArgumentError, ZenTaoError
from zentao_mcp.mcp_server._core import ToolResult, ToolSpec, _extract, string

APP_LOGIN_MESSAGE = (
    "Successfully set app credentials. "
    "The client will now use app-based authentication for all API calls."
)
SESSION_LOGIN_MESSAGE = "Session authentication successful. You can now use other ZenTao tools."

_APP_PARAMS = (
    string("code", "ZenTao application code", required=True),
    string("key", "ZenTao application key", required=True),
)

_SESSION_PARAMS = (
    string("account", "ZenTao username/account", required=True),
    string("password", "ZenTao password", required=True),
)


def _zentao_login(client, arguments: dict) -> ToolResult:
    try:
        code, key = (_extract(p, arguments) for p in _APP_PARAMS)
    except ArgumentError as e:
        return ToolResult(f"Invalid arguments for zentao_login: {e}", is_error=True)
    _log_event(
        "info",
        "auth",
        "Setting app credentials",
        code_length=len(code),
        key_length=len(key),
    )
    client.set_app_credentials(code, key)
    return ToolResult(APP_LOGIN_MESSAGE)


def _zentao_login_session(client, arguments: dict) -> ToolResult:
    try:
        account, password = (_extract(p, arguments) for p in _SESSION_PARAMS)
    except ArgumentError as e:
        return ToolResult(f"Invalid arguments for zentao_login_session: {e}", is_error=True)
    _log_event("info", "auth", "Starting session login", account=account)
    try:
        client.get_session_id()
    except ZenTaoError as e:
        _log_event("error", "auth", "Failed to get session ID", error=str(e))
        return ToolResult(f"Failed to get session ID: {e}", is_error=True)
    try:
        client.login(account, password)
    except ZenTaoError as e:
        _log_event("error", "auth", "Login failed", account=account, error=str(e))
        return ToolResult(f"Login failed: {e}", is_error=True)
    _log_event(
        "info",
        "auth",
        "Session login complete",
        account=account,
        is_authenticated=client.is_authenticated(),
    )
    return ToolResult(SESSION_LOGIN_MESSAGE)


LOGIN = ToolSpec(
    name="zentao_login",
    description="Login to ZenTao with app credentials (code + key)",
    params=_APP_PARAMS,
    handler=_zentao_login,
)

LOGIN_SESSION = ToolSpec(
    name="zentao_login_session",
    description="Login to ZenTao with username/password using session authentication",
    params=_SESSION_PARAMS,
    handler=_zentao_login_session,
)


def register(registry):
    client = registry.client
    if client is None:
        _log_event("warn", "auth", "No client configured, skipping auth tools")
        return
    method = client.auth_method
    if method == AUTH_APP:
        registry.add(LOGIN)
    elif method == AUTH_SESSION:
        registry.add(LOGIN_SESSION)
    else:
        _log_event("warn", "auth", "No authentication tools registered", auth_method=method)
