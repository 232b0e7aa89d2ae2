"""Bug tools (REST-style /bugs and /products/{id}/bugs)."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import ToolSpec, array, number, string

BUG_TYPES = (
    "codeerror",
    "config",
    "install",
    "security",
    "performance",
    "standard",
    "automation",
    "designdefect",
    "others",
)

_BUG_FIELDS = (
    number("branch", "Branch ID"),
    number("module", "Module ID"),
    number("execution", "Execution ID"),
    string("keywords", "Keywords"),
    string("os", "Operating system"),
    string("browser", "Browser"),
    string("steps", "Reproduction steps"),
    number("task", "Related task ID"),
    number("story", "Related story ID"),
    string("deadline", "Deadline (YYYY-MM-DD)"),
    array("openedBuild", "Affected builds"),
)

TOOLS = (
    ToolSpec(
        name="create_bug",
        description="Create a new bug in ZenTao",
        method="POST",
        path="/products/{product}/bugs",
        params=(
            number("product", "Product ID", required=True),
            string("title", "Bug title", required=True),
            number("severity", "Severity (1-4)", required=True),
            number("pri", "Priority (1-9)", required=True),
            string("type", "Bug type", required=True, enum=BUG_TYPES),
            *_BUG_FIELDS,
        ),
    ),
    ToolSpec(
        name="update_bug",
        description="Update an existing bug in ZenTao",
        method="PUT",
        path="/bugs/{id}",
        params=(
            number("id", "Bug ID", required=True),
            string("title", "Bug title"),
            number("severity", "Severity (1-4)"),
            number("pri", "Priority (1-9)"),
            string("type", "Bug type", enum=BUG_TYPES),
            *_BUG_FIELDS,
        ),
    ),
    ToolSpec(
        name="delete_bug",
        description="Delete a bug from ZenTao",
        method="DELETE",
        path="/bugs/{id}",
        params=(number("id", "Bug ID to delete", required=True),),
    ),
    ToolSpec(
        name="get_bugs",
        description="Get list of bugs in ZenTao",
        path="/bugs",
        params=(
            number("product", "Filter by product ID", when="positive"),
            number("project", "Filter by project ID", when="positive"),
            number("execution", "Filter by execution ID", when="positive"),
            string(
                "status",
                "Filter by bug status",
                enum=("active", "resolved", "closed"),
                when="non_empty",
            ),
            number("assignedTo", "Filter by assigned user ID", when="positive"),
            number("openedBy", "Filter by opened by user ID", when="positive"),
            number("limit", "Maximum number of bugs to return (default: 100)", when="positive"),
            number("offset", "Offset for pagination (default: 0)", when="non_negative"),
        ),
    ),
    ToolSpec(
        name="get_bug",
        description="Get details of a specific bug by ID",
        path="/bug/{id}",
        params=(number("id", "Bug ID", required=True),),
    ),
)


def register(registry):
    registry.add_all(TOOLS)
