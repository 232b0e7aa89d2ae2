"""Task tools (REST-style /tasks and /executions/{id}/tasks)."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import BODY, PATH, ToolSpec, array, number, string

TASK_TYPES = ("design", "devel", "request", "test", "study", "discuss", "ui", "affair", "misc")
TASK_STATUSES = ("wait", "doing", "done", "pause", "cancel", "closed")

_TASK_FIELDS = (
    number("module", "Module ID"),
    number("story", "Associated story ID"),
    number("fromBug", "From bug ID"),
    number("pri", "Priority (1-9)"),
    number("estimate", "Estimated hours", to="float"),
)

TOOLS = (
    ToolSpec(
        name="create_task",
        description="Create a new task in ZenTao",
        method="POST",
        path="/executions/{execution}/tasks",
        fixed_body={"openedBy": 1},
        params=(
            number("execution", "Execution ID", required=True),
            string("name", "Task name", required=True),
            string(
                "type",
                "Task type (design|devel|request|test|study|discuss|ui|affair|misc)",
                required=True,
                enum=TASK_TYPES,
            ),
            array("assignedTo", "Assigned to user accounts", required=True),
            # The start date doubles as the task's opened date.
            string(
                "estStarted",
                "Estimated start date (YYYY-MM-DD)",
                required=True,
                into=BODY,
                key=("estStarted", "openedDate"),
            ),
            string("deadline", "Estimated end date (YYYY-MM-DD)", required=True),
            *_TASK_FIELDS,
        ),
    ),
    ToolSpec(
        name="update_task",
        description="Update an existing task in ZenTao",
        method="PUT",
        path="/tasks/{id}",
        params=(
            number("id", "Task ID", required=True, into=PATH),
            string("name", "Task name"),
            string("type", "Task type", enum=TASK_TYPES),
            array("assignedTo", "Assigned to user accounts"),
            string("estStarted", "Estimated start date (YYYY-MM-DD)"),
            string("deadline", "Estimated end date (YYYY-MM-DD)"),
            *_TASK_FIELDS,
        ),
    ),
    ToolSpec(
        name="delete_task",
        description="Delete a task from ZenTao",
        method="DELETE",
        path="/tasks/{id}",
        params=(number("id", "Task ID to delete", required=True),),
    ),
    ToolSpec(
        name="get_tasks",
        description="Get list of tasks in ZenTao",
        path="/tasks",
        params=(
            number("execution", "Filter by execution ID", when="positive"),
            number("story", "Filter by story ID", when="positive"),
            string("status", "Filter by task status", enum=TASK_STATUSES, when="non_empty"),
            string("type", "Filter by task type", enum=TASK_TYPES, when="non_empty"),
            number("assignedTo", "Filter by assigned user ID", when="positive"),
            number("openedBy", "Filter by opened by user ID", when="positive"),
            number("pri", "Filter by priority (1-9)", when="priority"),
            number("limit", "Maximum number of tasks to return (default: 100)", when="positive"),
            number("offset", "Offset for pagination (default: 0)", when="non_negative"),
        ),
    ),
    ToolSpec(
        name="get_task",
        description="Get details of a specific task by ID",
        path="/task/{id}",
        params=(number("id", "Task ID", required=True),),
    ),
)


def register(registry):
    registry.add_all(TOOLS)
