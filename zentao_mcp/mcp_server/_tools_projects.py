"""Project tools, including execution creation under a project."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import BODY, PATH, ToolSpec, array, number, string

TOOLS = (
    ToolSpec(
        name="create_project",
        description="Create a new project in ZenTao",
        method="POST",
        path="/projects",
        params=(
            string("name", "Project name", required=True),
            string("code", "Project code", required=True),
            string("begin", "Planned start date (YYYY-MM-DD)", required=True),
            string("end", "Planned end date (YYYY-MM-DD)", required=True),
            array("products", "Associated product IDs", required=True, items="number", to="ints"),
            string(
                "model",
                "Project model (scrum|agileplus|waterfall|kanban)",
                enum=("scrum", "agileplus", "waterfall", "kanban"),
            ),
            number("parent", "Parent program, 0 means no parent"),
        ),
    ),
    ToolSpec(
        name="update_project",
        description="Update an existing project in ZenTao",
        method="PUT",
        path="/projects/{id}",
        params=(
            number("id", "Project ID", required=True),
            string("name", "Project name"),
            string("code", "Project code"),
            number("parent", "Parent program"),
            number("PM", "Project Manager ID"),
            number("budget", "Project budget amount"),
            string("budgetUnit", "Budget currency (CNY|USD)", enum=("CNY", "USD")),
            number("days", "Available workdays"),
            string("desc", "Project description"),
            string("acl", "Access control (open|private)", enum=("open", "private")),
        ),
    ),
    ToolSpec(
        name="delete_project",
        description="Delete a project from ZenTao",
        method="DELETE",
        path="/projects/{id}",
        params=(number("id", "Project ID to delete", required=True),),
    ),
    ToolSpec(
        name="create_execution",
        description="Create a new execution (sprint/iteration) in ZenTao",
        method="POST",
        path="/projects/{project}/executions",
        params=(
            number("project", "Parent project ID", required=True, into=(PATH, BODY)),
            string("name", "Execution name", required=True),
            string("code", "Execution code", required=True),
            string("begin", "Planned start date (YYYY-MM-DD)", required=True),
            string("end", "Planned end date (YYYY-MM-DD)", required=True),
            number("days", "Available workdays"),
            string("lifetime", "Type (short|long|ops)", enum=("short", "long", "ops")),
            string("PO", "Product Owner"),
            string("PM", "Iteration Manager"),
            string("QD", "Quality Director"),
            string("RD", "Release Director"),
            array("teamMembers", "Team members"),
            string("desc", "Iteration description"),
        ),
    ),
    ToolSpec(
        name="delete_execution",
        description="Delete an execution from ZenTao",
        method="DELETE",
        path="/executions/{id}",
        params=(number("id", "Execution ID to delete", required=True),),
    ),
)


def register(registry):
    registry.add_all(TOOLS)
