"""Design document tools (legacy m=design endpoints)."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import BODY, QUERY, ToolSpec, array, legacy, number, string

DESIGN_TYPES = ("all", "bySearch", "HLDS", "DDS", "DBDS", "ADS")

_PAGING = (
    number("recTotal", "Total records"),
    number("recPerPage", "Records per page"),
    number("pageID", "Page ID"),
)


def _scope(into=None):
    return (
        number("projectID", "Project ID", required=True, into=into),
        number("productID", "Product ID", required=True, into=into),
    )


TOOLS = (
    ToolSpec(
        name="browse_designs",
        description="Browse designs for a project/product",
        path=legacy("design", "browse"),
        params=(
            number("projectID", "Project ID"),
            number("productID", "Product ID"),
            string("type", "Design type", enum=DESIGN_TYPES),
            number("param", "Parameter value"),
            string("orderBy", "Order by field"),
            *_PAGING,
        ),
    ),
    ToolSpec(
        name="create_design",
        description="Create a new design document",
        method="POST",
        path=legacy("design", "create"),
        params=(
            *_scope(QUERY),
            string("type", "Design type", required=True, enum=DESIGN_TYPES, into=(QUERY, BODY)),
            string("name", "Design name", required=True),
            string("desc", "Design description"),
            string("content", "Design content"),
            number("assignedTo", "Assigned to user ID"),
        ),
    ),
    ToolSpec(
        name="batch_create_designs",
        description="Create multiple design documents",
        method="POST",
        path=legacy("design", "batchCreate"),
        params=(
            *_scope(QUERY),
            string("type", "Design type", required=True, enum=DESIGN_TYPES, into=QUERY),
            array("names", "Design names", required=True),
            array("descs", "Design descriptions"),
        ),
    ),
    ToolSpec(
        name="view_design",
        description="View a design document",
        path=legacy("design", "view"),
        params=(number("designID", "Design ID", required=True),),
    ),
    ToolSpec(
        name="edit_design",
        description="Edit a design document",
        method="POST",
        path=legacy("design", "edit"),
        params=(
            number("designID", "Design ID", required=True, into=QUERY),
            string("name", "Design name"),
            string("desc", "Design description"),
            string("content", "Design content"),
            number("assignedTo", "Assigned to user ID"),
        ),
    ),
    ToolSpec(
        name="delete_design",
        description="Delete a design document",
        path=legacy("design", "delete"),
        params=(number("designID", "Design ID", required=True),),
    ),
    ToolSpec(
        name="assign_design",
        description="Assign a design to a user",
        method="POST",
        path=legacy("design", "assignTo"),
        params=(
            number("designID", "Design ID", required=True, into=QUERY),
            number("assignedTo", "User ID to assign to", required=True),
        ),
    ),
    ToolSpec(
        name="link_commit_to_design",
        description="Link a commit to a design document",
        method="POST",
        path=legacy("design", "linkCommit"),
        into=QUERY,
        params=(
            number("designID", "Design ID", required=True),
            number("repoID", "Repository ID", required=True),
            string("begin", "Begin commit hash", into=BODY),
            string("end", "End commit hash", into=BODY),
            *_PAGING,
        ),
    ),
    ToolSpec(
        name="unlink_commit_from_design",
        description="Unlink a commit from a design document",
        path=legacy("design", "unlinkCommit"),
        params=(
            number("designID", "Design ID", required=True),
            number("commitID", "Commit ID", required=True),
        ),
    ),
    ToolSpec(
        name="view_design_commits",
        description="View commits linked to a design",
        path=legacy("design", "viewCommit"),
        params=(number("designID", "Design ID", required=True), *_PAGING),
    ),
    ToolSpec(
        name="get_design_switcher_menu",
        description="Get design switcher menu",
        path=legacy("design", "ajaxSwitcherMenu"),
        params=_scope(),
    ),
    ToolSpec(
        name="get_product_stories_for_design",
        description="Get product stories for design purposes",
        path=legacy("design", "ajaxGetProductStories"),
        params=(
            number("productID", "Product ID", required=True),
            number("projectID", "Project ID", required=True),
            string("status", "Story status"),
            string("hasParent", "Has parent story"),
        ),
    ),
    ToolSpec(
        name="confirm_story_change_for_design",
        description="Confirm story change for design",
        path=legacy("design", "confirmStoryChange"),
        params=(number("designID", "Design ID", required=True),),
    ),
)


def register(registry):
    registry.add_all(TOOLS)
