"""Product plan tools (REST-style /productplans)."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import ToolSpec, array, number, string

_PLAN_FIELDS = (
    number("branch", "Branch ID"),
    string("begin", "Plan start date (YYYY-MM-DD)"),
    string("end", "Plan end date (YYYY-MM-DD)"),
    string("desc", "Plan description"),
)

TOOLS = (
    ToolSpec(
        name="create_plan",
        description="Create a new product plan in ZenTao",
        method="POST",
        path="/products/{product}/plans",
        params=(
            number("product", "Product ID", required=True),
            string("title", "Plan name", required=True),
            *_PLAN_FIELDS,
            number("parent", "Parent plan ID"),
        ),
    ),
    ToolSpec(
        name="update_plan",
        description="Update an existing product plan in ZenTao",
        method="PUT",
        path="/productplans/{id}",
        params=(
            number("id", "Plan ID", required=True),
            string("title", "Plan name"),
            *_PLAN_FIELDS,
        ),
    ),
    ToolSpec(
        name="delete_plan",
        description="Delete a product plan from ZenTao",
        method="DELETE",
        path="/productplans/{id}",
        params=(number("id", "Plan ID to delete", required=True),),
    ),
    ToolSpec(
        name="link_stories_to_plan",
        description="Link stories to a product plan in ZenTao",
        method="POST",
        path="/productplans/{id}/linkstories",
        action="link stories",
        params=(
            number("id", "Plan ID", required=True),
            array("stories", "Story IDs to link", required=True, items="number"),
        ),
    ),
    ToolSpec(
        name="unlink_stories_from_plan",
        description="Unlink stories from a product plan in ZenTao",
        method="POST",
        path="/productplans/{id}/unlinkstories",
        action="unlink stories",
        params=(
            number("id", "Plan ID", required=True),
            array("stories", "Story IDs to unlink", required=True, items="number"),
        ),
    ),
    ToolSpec(
        name="link_bugs_to_plan",
        description="Link bugs to a product plan in ZenTao",
        method="POST",
        path="/products/{product}/linkBugs",
        action="link bugs",
        params=(
            number("product", "Product ID", required=True),
            array("bugs", "Bug IDs to link", required=True, items="number"),
        ),
    ),
    ToolSpec(
        name="unlink_bugs_from_plan",
        description="Unlink bugs from a product plan in ZenTao",
        method="POST",
        path="/productplans/{id}/unlinkbugs",
        action="unlink bugs",
        params=(
            number("id", "Plan ID", required=True),
            array("bugs", "Bug IDs to unlink", required=True, items="number"),
        ),
    ),
)


def register(registry):
    registry.add_all(TOOLS)
