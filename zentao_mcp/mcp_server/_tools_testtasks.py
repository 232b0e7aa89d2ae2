"""Test task (test run) tools."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import ToolSpec, number, string

TOOLS = (
    ToolSpec(
        name="create_testtask",
        description="Create a new test task in ZenTao",
        method="POST",
        path="/testtasks",
        action="create test task",
        params=(
            number("project", "Project ID", required=True),
            string("name", "Test task name", required=True),
            string("begin", "Start date (YYYY-MM-DD)", required=True),
            string("end", "End date (YYYY-MM-DD)", required=True),
            string("owner", "Owner user account"),
            string("desc", "Test task description"),
        ),
    ),
    ToolSpec(
        name="delete_testtask",
        description="Delete a test task from ZenTao",
        method="DELETE",
        path="/testtasks/{id}",
        action="delete test task",
        params=(number("id", "Test Task ID to delete", required=True),),
    ),
)


def register(registry):
    registry.add_all(TOOLS)
