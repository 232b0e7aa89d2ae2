"""Requirement (user requirement story) tools, legacy m=requirement endpoints."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import BODY, QUERY, ToolSpec, array, legacy, number, string

_PAGING = (
    number("recTotal", "Total records"),
    number("recPerPage", "Records per page"),
    number("pageID", "Page ID"),
)


def _story(description="Requirement ID"):
    return number("storyID", description, required=True)


CRUD_TOOLS = (
    ToolSpec(
        name="create_requirement",
        description="Create a new requirement",
        method="POST",
        path=legacy("requirement", "create"),
        into=QUERY,
        params=(
            number("productID", "Product ID", required=True),
            number("branch", "Branch ID"),
            number("moduleID", "Module ID"),
            number("storyID", "Story ID"),
            number("objectID", "Object ID (projectID|executionID)"),
            number("bugID", "Bug ID"),
            number("planID", "Plan ID"),
            number("todoID", "Todo ID"),
            string("extra", "Extra parameters"),
            string("title", "Requirement title", required=True, into=BODY),
            string("spec", "Requirement specification", into=BODY),
            number("pri", "Priority", into=BODY),
            number("estimate", "Estimate", into=BODY),
        ),
    ),
    ToolSpec(
        name="batch_create_requirements",
        description="Create multiple requirements",
        method="POST",
        path=legacy("requirement", "batchCreate"),
        into=QUERY,
        params=(
            number("productID", "Product ID", required=True),
            string("branch", "Branch"),
            number("moduleID", "Module ID"),
            number("storyID", "Story ID"),
            number("executionID", "Execution ID"),
            number("plan", "Plan ID"),
            string("storyType", "Story type"),
            string("extra", "Extra parameters"),
            array("titles", "Requirement titles", required=True, into=BODY),
            array("specs", "Requirement specifications", into=BODY),
        ),
    ),
    ToolSpec(
        name="view_requirement",
        description="View a requirement",
        path=legacy("requirement", "view"),
        params=(
            _story(),
            number("version", "Version"),
            number("param", "Parameter (executionID|projectID)"),
        ),
    ),
    ToolSpec(
        name="edit_requirement",
        description="Edit a requirement",
        method="POST",
        path=legacy("requirement", "edit"),
        params=(
            number("storyID", "Requirement ID", required=True, into=QUERY),
            string("kanbanGroup", "Kanban group", into=QUERY),
            string("title", "Requirement title"),
            string("spec", "Requirement specification"),
            number("pri", "Priority"),
            number("estimate", "Estimate"),
        ),
    ),
    ToolSpec(
        name="batch_edit_requirements",
        description="Batch edit requirements",
        method="POST",
        path=legacy("requirement", "batchEdit"),
        into=QUERY,
        params=(
            number("productID", "Product ID", required=True),
            number("executionID", "Execution ID"),
            string("branch", "Branch"),
            string("storyType", "Story type"),
            string("from", "Source"),
            array("requirementIDs", "Requirement IDs to edit", required=True, into=BODY),
            array("titles", "New titles", into=BODY),
            array("specs", "New specifications", into=BODY),
        ),
    ),
    ToolSpec(
        name="delete_requirement",
        description="Delete a requirement",
        path=legacy("requirement", "delete"),
        params=(
            _story(),
            string("confirm", "Confirmation", enum=("yes", "no")),
            string("from", "Source"),
        ),
    ),
)

LINK_TOOLS = (
    ToolSpec(
        name="link_story_to_requirement",
        description="Link a story to a requirement",
        path=legacy("requirement", "linkStory"),
        params=(
            _story(),
            string("type", "Link type", enum=("linkStories", "linkRelateUR", "linkRelateSR")),
            number("linkedStoryID", "Story ID to link"),
            string("browseType", "Browse type"),
            number("queryID", "Query ID"),
        ),
    ),
    ToolSpec(
        name="link_requirements",
        description="Link requirements together",
        path=legacy("requirement", "linkRequirements"),
        params=(
            _story(),
            string("browseType", "Browse type"),
            string("excludeStories", "Exclude stories"),
            number("param", "Parameter value"),
            *_PAGING,
        ),
    ),
)

TRANSFER_TOOLS = (
    ToolSpec(
        name="import_requirements",
        description="Import requirements",
        path=legacy("requirement", "import"),
        params=(
            number("productID", "Product ID", required=True),
            number("branch", "Branch"),
            string("storyType", "Story type"),
            number("projectID", "Project ID"),
        ),
    ),
    ToolSpec(
        name="export_requirements",
        description="Export requirements",
        path=legacy("requirement", "export"),
        params=(
            number("productID", "Product ID", required=True),
            string("orderBy", "Order by field"),
            number("executionID", "Execution ID"),
            string("browseType", "Browse type"),
        ),
    ),
    ToolSpec(
        name="export_requirement_template",
        description="Export requirement template",
        path=legacy("requirement", "exportTemplate"),
        params=(
            number("productID", "Product ID", required=True),
            number("branch", "Branch"),
            string("storyType", "Story type"),
        ),
    ),
)

WORKFLOW_TOOLS = (
    ToolSpec(
        name="assign_requirement",
        description="Assign a requirement to a user",
        method="POST",
        path=legacy("requirement", "assignTo"),
        params=(
            number("storyID", "Requirement ID", required=True, into=QUERY),
            number("assignedTo", "User ID to assign to", required=True),
        ),
    ),
    ToolSpec(
        name="batch_assign_requirements",
        description="Batch assign requirements",
        method="POST",
        path=legacy("requirement", "batchAssignTo"),
        params=(
            string("storyType", "Story type", enum=("story", "requirement")),
            number("assignedTo", "User ID to assign to", required=True),
            array("requirementIDs", "Requirement IDs to assign", required=True),
        ),
    ),
    ToolSpec(
        name="close_requirement",
        description="Close a requirement",
        method="POST",
        path=legacy("requirement", "close"),
        into=QUERY,
        fixed_body={},
        params=(_story(), string("from", "Source")),
    ),
    ToolSpec(
        name="batch_close_requirements",
        description="Batch close requirements",
        method="POST",
        path=legacy("requirement", "batchClose"),
        into=QUERY,
        params=(
            number("productID", "Product ID", required=True),
            number("executionID", "Execution ID"),
            string("storyType", "Story type"),
            string("from", "Source", enum=("contribute", "work")),
        ),
    ),
    ToolSpec(
        name="activate_requirement",
        description="Activate a requirement",
        method="POST",
        path=legacy("requirement", "activate"),
        into=QUERY,
        fixed_body={},
        params=(_story(),),
    ),
    ToolSpec(
        name="review_requirement",
        description="Review a requirement",
        method="POST",
        path=legacy("requirement", "review"),
        into=QUERY,
        fixed_body={},
        params=(_story(), string("from", "Source", enum=("product", "project"))),
    ),
    ToolSpec(
        name="batch_review_requirements",
        description="Batch review requirements",
        method="POST",
        path=legacy("requirement", "batchReview"),
        params=(
            string("result", "Review result", required=True),
            string("reason", "Review reason"),
        ),
    ),
    ToolSpec(
        name="report_requirements",
        description="Generate requirement reports",
        method="POST",
        path=legacy("requirement", "report"),
        into=QUERY,
        fixed_body={},
        action="generate requirement report",
        params=(
            number("productID", "Product ID", required=True),
            number("branchID", "Branch ID"),
            string("storyType", "Story type"),
            string("browseType", "Browse type"),
            number("moduleID", "Module ID"),
            string("chartType", "Chart type"),
            number("projectID", "Project ID"),
        ),
    ),
)

BATCH_TOOLS = (
    ToolSpec(
        name="batch_change_requirement_branch",
        description="Batch change requirement branch",
        method="POST",
        path=legacy("requirement", "batchChangeBranch"),
        into=QUERY,
        params=(
            number("branchID", "New branch ID", required=True),
            string("confirm", "Confirmation", enum=("yes", "no")),
            string("storyIdList", "Story ID list"),
        ),
    ),
    ToolSpec(
        name="batch_change_requirement_module",
        description="Batch change requirement module",
        method="POST",
        path=legacy("requirement", "batchChangeModule"),
        into=QUERY,
        params=(number("moduleID", "New module ID", required=True),),
    ),
    ToolSpec(
        name="batch_change_requirement_parent",
        description="Batch change requirement parent",
        method="POST",
        path=legacy("requirement", "batchChangeParent"),
        into=QUERY,
        params=(
            number("productID", "Product ID", required=True),
            string("storyType", "Story type"),
        ),
    ),
    ToolSpec(
        name="batch_change_requirement_grade",
        description="Batch change requirement grade",
        method="POST",
        path=legacy("requirement", "batchChangeGrade"),
        into=QUERY,
        params=(
            number("grade", "New grade", required=True),
            string("storyType", "Story type"),
        ),
    ),
    ToolSpec(
        name="batch_change_requirement_plan",
        description="Batch change requirement plan",
        method="POST",
        path=legacy("requirement", "batchChangePlan"),
        into=QUERY,
        params=(
            number("planID", "New plan ID", required=True),
            number("oldPlanID", "Old plan ID"),
        ),
    ),
)


def register(registry):
    for group in (CRUD_TOOLS, LINK_TOOLS, TRANSFER_TOOLS, WORKFLOW_TOOLS, BATCH_TOOLS):
        registry.add_all(group)
