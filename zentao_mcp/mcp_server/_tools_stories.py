"""Story tools (REST-style /stories)."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import ToolSpec, number, string

STORY_CATEGORIES = ("feature", "interface", "performance", "safe", "experience", "improve", "other")
STORY_STATUSES = ("draft", "active", "changed", "closed")
STORY_STAGES = (
    "wait",
    "planned",
    "projected",
    "developing",
    "developed",
    "testing",
    "tested",
    "verified",
    "released",
    "closed",
)

TOOLS = (
    ToolSpec(
        name="create_story",
        description="Create a new user story in ZenTao",
        method="POST",
        path="/stories",
        params=(
            string("title", "Story title", required=True),
            number("product", "Product ID", required=True),
            number("pri", "Priority (1-9)", required=True),
            string("category", "Story category", required=True),
            string("spec", "Story description"),
            string("verify", "Acceptance criteria"),
            string("source", "Source"),
            string("sourceNote", "Source note"),
            number("estimate", "Estimated hours", to="float"),
            string("keywords", "Keywords"),
        ),
    ),
    ToolSpec(
        name="update_story",
        description="Update an existing story in ZenTao",
        method="PUT",
        path="/stories/{id}",
        params=(
            number("id", "Story ID", required=True),
            number("module", "Module ID"),
            string("source", "Source"),
            string("sourceNote", "Source note"),
            number("pri", "Priority (1-9)"),
            string(
                "category",
                "Type (feature|interface|performance|safe|experience|improve|other)",
                enum=STORY_CATEGORIES,
            ),
            number("estimate", "Estimated hours", to="float"),
            string("keywords", "Keywords"),
        ),
    ),
    ToolSpec(
        name="change_story",
        description="Change story content",
        method="POST",
        path="/stories/{id}/change",
        params=(
            number("id", "Story ID", required=True),
            string("title", "Story title"),
            string("spec", "Story description"),
            string("verify", "Acceptance criteria"),
        ),
    ),
    ToolSpec(
        name="delete_story",
        description="Delete a story from ZenTao",
        method="DELETE",
        path="/stories/{id}",
        params=(number("id", "Story ID to delete", required=True),),
    ),
    ToolSpec(
        name="get_stories",
        description="Get list of user stories in ZenTao",
        path="/stories",
        params=(
            number("product", "Filter by product ID", when="positive"),
            number("project", "Filter by project ID", when="positive"),
            number("execution", "Filter by execution ID", when="positive"),
            string("status", "Filter by story status", enum=STORY_STATUSES, when="non_empty"),
            string("stage", "Filter by story stage", enum=STORY_STAGES, when="non_empty"),
            number("pri", "Filter by priority (1-9)", when="priority"),
            number(
                "limit", "Maximum number of stories to return (default: 100)", when="positive"
            ),
            number("offset", "Offset for pagination (default: 0)", when="non_negative"),
        ),
    ),
    ToolSpec(
        name="get_story",
        description="Get details of a specific story by ID",
        path="/story/{id}",
        params=(number("id", "Story ID", required=True),),
    ),
)


def register(registry):
    registry.add_all(TOOLS)
