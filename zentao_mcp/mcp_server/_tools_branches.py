"""Product branch tools (m=branch)."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import QUERY, ToolSpec, array, legacy, number, string


def _product(**kwargs):
    return number("productID", "Product ID", required=True, **kwargs)


TOOLS = (
    ToolSpec(
        name="manage_branches",
        description="Manage branches for a product",
        path=legacy("branch", "manage"),
        params=(
            _product(),
            string("browseType", "Browse type"),
            string("orderBy", "Order by field"),
            number("recTotal", "Total records"),
            number("recPerPage", "Records per page"),
            number("pageID", "Page ID"),
        ),
    ),
    ToolSpec(
        name="create_branch",
        description="Create a new branch for a product",
        method="POST",
        path=legacy("branch", "create"),
        params=(
            _product(into=QUERY),
            string("name", "Branch name", required=True),
            string("desc", "Branch description"),
        ),
    ),
    ToolSpec(
        name="edit_branch",
        description="Edit an existing branch",
        method="POST",
        path=legacy("branch", "edit"),
        params=(
            number("branchID", "Branch ID", required=True, into=QUERY),
            _product(into=QUERY),
            string("name", "Branch name"),
            string("desc", "Branch description"),
        ),
    ),
    ToolSpec(
        name="batch_edit_branches",
        description="Batch edit branches for a product",
        method="POST",
        path=legacy("branch", "batchEdit"),
        params=(
            _product(into=QUERY),
            array("branchIDs", "Branch IDs to edit", required=True),
            array("names", "New branch names"),
            array("descs", "New branch descriptions"),
        ),
    ),
    ToolSpec(
        name="close_branch",
        description="Close a branch",
        path=legacy("branch", "close"),
        params=(number("branchID", "Branch ID", required=True),),
    ),
    ToolSpec(
        name="activate_branch",
        description="Activate a branch",
        path=legacy("branch", "activate"),
        params=(number("branchID", "Branch ID", required=True),),
    ),
    ToolSpec(
        name="sort_branches",
        description="Sort branches",
        method="POST",
        path=legacy("branch", "sort"),
        params=(array("branchOrders", "Branch order mapping", required=True, key="orders"),),
    ),
    ToolSpec(
        name="get_branches",
        description="Get branches for a product",
        path=legacy("branch", "ajaxGetBranches"),
        params=(
            _product(),
            string("oldBranch", "Old branch"),
            string("browseType", "Browse type"),
            number("projectID", "Project ID"),
            string("withMainBranch", "Include main branch"),
            string("isTwins", "Is twins"),
            string("fieldID", "Field ID"),
            string("multiple", "Multiple selection"),
            number("charterID", "Charter ID"),
        ),
    ),
    ToolSpec(
        name="merge_branch",
        description="Merge branches for a product",
        method="POST",
        path=legacy("branch", "mergeBranch"),
        action="merge branches",
        params=(
            _product(into=QUERY),
            number("sourceBranch", "Source branch ID", required=True),
            number("targetBranch", "Target branch ID", required=True),
        ),
    ),
)


def register(registry):
    registry.add_all(TOOLS)
