"""User tools over the REST ``/users`` resource."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import ToolSpec, array, number, string

TOOLS = (
    ToolSpec(
        name="create_user",
        description="Create a new user in ZenTao",
        method="POST",
        path="/users",
        params=(
            string("account", "User account name", required=True),
            string("password", "User password", required=True),
            string("realname", "Real name"),
            array("visions", "Interface types (rnd|lite)"),
        ),
    ),
    ToolSpec(
        name="update_user",
        description="Update an existing user in ZenTao",
        method="PUT",
        path="/users/{id}",
        params=(
            number("id", "User ID", required=True),
            number("dept", "Department ID"),
            string("role", "Role"),
            string("mobile", "Mobile number"),
            string("realname", "Real name"),
            string("email", "Email"),
            string("phone", "Phone number"),
        ),
    ),
    ToolSpec(
        name="delete_user",
        description="Delete a user from ZenTao",
        method="DELETE",
        path="/users/{id}",
        params=(number("id", "User ID to delete", required=True),),
    ),
    # Empty strings and out-of-range numbers are dropped rather than sent.
    ToolSpec(
        name="get_users",
        description="Get list of users in ZenTao",
        path="/users",
        params=(
            string("account", "Filter by account name", when="non_empty"),
            string("realname", "Filter by real name", when="non_empty"),
            string("email", "Filter by email", when="non_empty"),
            string(
                "status", "Filter by user status", enum=("active", "forbidden"), when="non_empty"
            ),
            number("dept", "Filter by department ID", when="positive"),
            string("role", "Filter by role", when="non_empty"),
            number("limit", "Maximum number of users to return (default: 100)", when="positive"),
            number("offset", "Offset for pagination (default: 0)", when="non_negative"),
        ),
    ),
    ToolSpec(
        name="get_my_profile",
        description="Get current user's profile information",
        path="/user",
        action="get user profile",
    ),
    ToolSpec(
        name="get_user",
        description="Get details of a specific user by ID",
        path="/user/{id}",
        params=(number("id", "User ID", required=True),),
    ),
)


def register(registry):
    registry.add_all(TOOLS)
