"""Build tools (legacy m=build endpoints)."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import BODY, QUERY, ToolSpec, legacy, number, string

_BUILD_FIELDS = (
    string("builder", "Builder"),
    string("desc", "Description"),
    string("scmPath", "SCM path"),
    string("filePath", "File path"),
    string("date", "Build date"),
)

_LINK_PAGING = (
    string("browseType", "Browse type"),
    number("param", "Parameter value"),
    string("orderBy", "Order by field"),
    number("recTotal", "Total records"),
    number("recPerPage", "Records per page"),
    number("pageID", "Page ID"),
)

# get_execution_builds is served by the executions module (m=execution&f=build).
TOOLS = (
    ToolSpec(
        name="create_build",
        description="Create a new build",
        method="POST",
        path=legacy("build", "create"),
        params=(
            number("executionID", "Execution ID", into=QUERY),
            number("productID", "Product ID", required=True, into=QUERY),
            number("projectID", "Project ID", required=True, into=QUERY),
            string("name", "Build name", required=True),
            *_BUILD_FIELDS,
        ),
    ),
    ToolSpec(
        name="edit_build",
        description="Edit an existing build",
        method="POST",
        path=legacy("build", "edit"),
        params=(
            number("buildID", "Build ID", required=True, into=QUERY),
            string("name", "Build name", into=BODY),
            *_BUILD_FIELDS,
        ),
    ),
    ToolSpec(
        name="view_build",
        description="View build details",
        path=legacy("build", "view"),
        params=(
            number("buildID", "Build ID", required=True),
            string("type", "View type"),
            string("link", "Link"),
            string("param", "Parameter"),
            string("orderBy", "Order by field"),
            number("recTotal", "Total records"),
            number("recPerPage", "Records per page"),
            number("pageID", "Page ID"),
        ),
    ),
    ToolSpec(
        name="delete_build",
        description="Delete a build",
        path=legacy("build", "delete"),
        params=(
            number("buildID", "Build ID", required=True),
            string("from", "Source", enum=("execution", "project")),
        ),
    ),
    ToolSpec(
        name="get_product_builds",
        description="Get product builds",
        path=legacy("build", "ajaxGetProductBuilds"),
        params=(
            number("productID", "Product ID", required=True),
            string("varName", "Variable name"),
            string("build", "Build filter"),
            string("branch", "Branch"),
            string("type", "Build type"),
        ),
    ),
    ToolSpec(
        name="get_project_builds",
        description="Get project builds",
        path=legacy("build", "ajaxGetProjectBuilds"),
        params=(
            number("projectID", "Project ID", required=True),
            number("productID", "Product ID"),
            string("varName", "Variable name"),
            string("build", "Build filter"),
            string("branch", "Branch"),
            string("needCreate", "Need create option"),
            string("type", "Build type"),
            string("system", "System"),
        ),
    ),
    ToolSpec(
        name="get_last_build",
        description="Get last build for project/execution",
        path=legacy("build", "ajaxGetLastBuild"),
        params=(
            number("projectID", "Project ID"),
            number("executionID", "Execution ID"),
        ),
    ),
    ToolSpec(
        name="link_story_to_build",
        description="Link a story to a build",
        method="POST",
        path=legacy("build", "linkStory"),
        into=QUERY,
        params=(number("buildID", "Build ID", required=True), *_LINK_PAGING),
    ),
    ToolSpec(
        name="unlink_story_from_build",
        description="Unlink a story from a build",
        path=legacy("build", "unlinkStory"),
        params=(
            number("buildID", "Build ID", required=True),
            number("storyID", "Story ID", required=True),
        ),
    ),
    ToolSpec(
        name="batch_unlink_stories_from_build",
        description="Batch unlink stories from a build",
        method="POST",
        path=legacy("build", "batchUnlinkStory"),
        into=QUERY,
        params=(number("buildID", "Build ID", required=True),),
    ),
    ToolSpec(
        name="link_bug_to_build",
        description="Link a bug to a build",
        method="POST",
        path=legacy("build", "linkBug"),
        into=QUERY,
        params=(number("buildID", "Build ID", required=True), *_LINK_PAGING),
    ),
    ToolSpec(
        name="unlink_bug_from_build",
        description="Unlink a bug from a build",
        path=legacy("build", "unlinkBug"),
        params=(
            number("buildID", "Build ID", required=True),
            number("bugID", "Bug ID", required=True),
        ),
    ),
    ToolSpec(
        name="batch_unlink_bugs_from_build",
        description="Batch unlink bugs from a build",
        method="POST",
        path=legacy("build", "batchUnlinkBug"),
        into=QUERY,
        params=(number("buildID", "Build ID", required=True),),
    ),
)


def register(registry):
    registry.add_all(TOOLS)
