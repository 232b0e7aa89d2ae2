"""Test case tools: REST CRUD plus the legacy m=testcase workflow endpoints."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import BODY, QUERY, ToolSpec, array, legacy, number, string

CASE_TYPES = (
    "feature",
    "performance",
    "config",
    "install",
    "security",
    "interface",
    "unit",
    "other",
)
# "intergrate" is the value ZenTao itself stores.
CASE_STAGES = ("unittest", "feature", "intergrate", "system", "smoke", "bvt")


def _paging():
    return (
        number("recTotal", "Total records"),
        number("recPerPage", "Records per page"),
        number("pageID", "Page ID for pagination"),
    )


def _case_fields(required):
    return (
        string("title", "Test case title", required=required),
        string("type", "Test case type", required=required, enum=CASE_TYPES),
        array("steps", "Test case steps", required=required),
        number("branch", "Branch ID"),
        number("module", "Module ID"),
        number("story", "Story ID"),
        string("stage", "Stage", enum=CASE_STAGES),
        string("precondition", "Precondition"),
        number("pri", "Priority (1-9)"),
        string("keywords", "Keywords"),
    )


def _cases_data(description="Test cases data as JSON array"):
    return string("cases_data", description, required=True, into=BODY)


CRUD_TOOLS = (
    ToolSpec(
        name="create_testcase",
        description="Create a new test case in ZenTao",
        method="POST",
        path="/products/{product}/testcases",
        action="create test case",
        params=(number("product", "Product ID", required=True), *_case_fields(True)),
    ),
    ToolSpec(
        name="update_testcase",
        description="Update an existing test case in ZenTao",
        method="PUT",
        path="/testcases/{id}",
        action="update test case",
        params=(number("id", "Test case ID", required=True), *_case_fields(False)),
    ),
    ToolSpec(
        name="delete_testcase",
        description="Delete a test case from ZenTao",
        path=legacy("testcase", "delete"),
        action="delete test case",
        params=(number("id", "Test case ID to delete", required=True, key="caseID"),),
    ),
    ToolSpec(
        name="browse_testcases",
        description="Browse test cases with filtering and pagination",
        path=legacy("testcase", "browse"),
        action="browse test cases",
        params=(
            number("productID", "Product ID", required=True),
            string("branch", "Branch"),
            string("browseType", "Browse type filter"),
            number("param", "Additional filter parameter"),
            string("caseType", "Case type filter"),
            string("orderBy", "Sort order"),
            *_paging(),
            number("projectID", "Project ID"),
            string("from", "Source context"),
            number("blockID", "Block ID"),
        ),
    ),
    ToolSpec(
        name="view_testcase",
        description="View test case details",
        path=legacy("testcase", "view"),
        action="view test case",
        params=(
            number("caseID", "Test case ID", required=True),
            number("version", "Case version"),
            string("from", "Source context"),
            number("taskID", "Task ID"),
            string("stepsType", "Steps type"),
        ),
    ),
)

BATCH_TOOLS = (
    ToolSpec(
        name="batch_create_testcases",
        description="Create multiple test cases at once",
        method="POST",
        path=legacy("testcase", "batchCreate"),
        action="batch create test cases",
        into=QUERY,
        params=(
            number("productID", "Product ID", required=True),
            string("branch", "Branch"),
            number("moduleID", "Module ID"),
            number("storyID", "Story ID"),
            _cases_data(),
        ),
    ),
    ToolSpec(
        name="batch_edit_testcases",
        description="Edit multiple test cases at once",
        method="POST",
        path=legacy("testcase", "batchEdit"),
        action="batch edit test cases",
        into=QUERY,
        params=(
            number("productID", "Product ID", required=True),
            string("branch", "Branch"),
            string("type", "Case type filter"),
            string("from", "Source context"),
            _cases_data("Updated test cases data as JSON array"),
        ),
    ),
    ToolSpec(
        name="batch_delete_testcases",
        description="Delete multiple test cases at once",
        method="POST",
        path=legacy("testcase", "batchDelete"),
        action="batch delete test cases",
        params=(_cases_data(),),
    ),
    ToolSpec(
        name="review_testcase",
        description="Review a test case",
        method="POST",
        path=legacy("testcase", "review"),
        action="review test case",
        params=(
            number("caseID", "Test case ID", required=True, into=QUERY),
            string("review_data", "Review data as JSON string", into=BODY),
        ),
    ),
    ToolSpec(
        name="batch_review_testcases",
        description="Review multiple test cases at once",
        method="POST",
        path=legacy("testcase", "batchReview"),
        action="batch review test cases",
        params=(string("result", "Review result", required=True), _cases_data()),
    ),
    ToolSpec(
        name="batch_change_testcase_branch",
        description="Change branch for multiple test cases",
        method="POST",
        path=legacy("testcase", "batchChangeBranch"),
        action="batch change branch",
        params=(number("branchID", "New branch ID", required=True, into=QUERY), _cases_data()),
    ),
    ToolSpec(
        name="batch_change_testcase_module",
        description="Change module for multiple test cases",
        method="POST",
        path=legacy("testcase", "batchChangeModule"),
        action="batch change module",
        params=(number("moduleID", "New module ID", required=True, into=QUERY), _cases_data()),
    ),
    ToolSpec(
        name="batch_change_testcase_type",
        description="Change type for multiple test cases",
        method="POST",
        path=legacy("testcase", "batchChangeType"),
        action="batch change type",
        params=(string("type", "New case type", required=True, into=QUERY), _cases_data()),
    ),
)

LINK_TOOLS = (
    ToolSpec(
        name="link_testcases",
        description="Link related test cases",
        path=legacy("testcase", "linkCases"),
        action="link test cases",
        params=(
            number("caseID", "Test case ID", required=True),
            string("browseType", "Browse type filter"),
            number("param", "Additional filter parameter"),
            *_paging(),
        ),
    ),
    ToolSpec(
        name="link_bugs_to_testcase",
        description="Link bugs to a test case",
        path=legacy("testcase", "linkBugs"),
        action="link bugs to test case",
        params=(
            number("caseID", "Test case ID", required=True),
            string("browseType", "Browse type filter"),
            number("param", "Additional filter parameter"),
            string("orderBy", "Sort order"),
            *_paging(),
        ),
    ),
    ToolSpec(
        name="create_bug_from_testcase",
        description="Create a bug from a test case",
        path=legacy("testcase", "createBug"),
        action="create bug from test case",
        params=(
            number("productID", "Product ID", required=True),
            number("caseID", "Test case ID", required=True),
            number("version", "Case version"),
            number("runID", "Test run ID"),
        ),
    ),
)

TRANSFER_TOOLS = (
    ToolSpec(
        name="export_testcases",
        description="Export test cases to file",
        method="POST",
        path=legacy("testcase", "export"),
        action="export test cases",
        into=QUERY,
        params=(
            number("productID", "Product ID", required=True),
            string("orderBy", "Sort order"),
            number("taskID", "Task ID"),
            string("browseType", "Browse type filter"),
        ),
    ),
    ToolSpec(
        name="export_testcase_template",
        description="Export import template for test cases",
        method="POST",
        path=legacy("testcase", "exportTemplate"),
        into=QUERY,
        action="export template",
        params=(number("productID", "Product ID", required=True),),
    ),
    ToolSpec(
        name="import_testcases",
        description="Import test cases from file",
        method="POST",
        path=legacy("testcase", "import"),
        action="import test cases",
        into=QUERY,
        params=(
            number("productID", "Product ID", required=True),
            string("branch", "Branch"),
            string("import_data", "Import data as JSON string", required=True, into=BODY),
        ),
    ),
    ToolSpec(
        name="import_testcases_from_lib",
        description="Import test cases from case library",
        method="POST",
        path=legacy("testcase", "importFromLib"),
        into=QUERY,
        action="import from library",
        params=(
            number("productID", "Product ID", required=True),
            number("libID", "Case library ID", required=True),
            string("branch", "Branch"),
            string("orderBy", "Sort order"),
            string("browseType", "Browse type filter"),
            number("queryID", "Query ID"),
            *_paging(),
            number("projectID", "Project ID"),
            _cases_data(),
        ),
    ),
    ToolSpec(
        name="import_testcase_to_lib",
        description="Import test case to case library",
        method="POST",
        path=legacy("testcase", "importToLib"),
        into=QUERY,
        action="import to library",
        params=(number("caseID", "Test case ID", required=True),),
    ),
)

SCENE_TOOLS = (
    ToolSpec(
        name="browse_testcase_scenes",
        description="Browse test case scenes",
        path=legacy("testcase", "browseScene"),
        action="browse scenes",
        params=(
            number("productID", "Product ID", required=True),
            string("branch", "Branch"),
            number("moduleID", "Module ID"),
            string("orderBy", "Sort order"),
            *_paging(),
        ),
    ),
    ToolSpec(
        name="create_testcase_scene",
        description="Create a new test case scene",
        method="POST",
        path=legacy("testcase", "createScene"),
        into=QUERY,
        action="create scene",
        params=(
            number("productID", "Product ID", required=True),
            number("branch", "Branch ID", required=True),
            number("moduleID", "Module ID"),
            string("scene_data", "Scene data as JSON string", required=True, into=BODY),
        ),
    ),
    ToolSpec(
        name="edit_testcase_scene",
        description="Edit a test case scene",
        method="POST",
        path=legacy("testcase", "editScene"),
        action="edit scene",
        params=(
            number("sceneID", "Scene ID", required=True, into=QUERY),
            string("scene_data", "Updated scene data as JSON string", required=True),
        ),
    ),
    ToolSpec(
        name="delete_testcase_scene",
        description="Delete a test case scene",
        path=legacy("testcase", "deleteScene"),
        action="delete scene",
        params=(
            number("sceneID", "Scene ID", required=True),
            string("confirm", "Confirmation"),
        ),
    ),
)

REPORT_TOOLS = (
    ToolSpec(
        name="group_testcases",
        description="Group test cases by criteria",
        path=legacy("testcase", "groupCase"),
        action="group test cases",
        params=(
            number("productID", "Product ID", required=True),
            string("groupBy", "Group by field", required=True),
            string("branch", "Branch"),
            number("objectID", "Object ID"),
            string("caseType", "Case type filter"),
            string("browseType", "Browse type filter"),
        ),
    ),
    ToolSpec(
        name="get_zero_testcases",
        description="Get test cases with zero execution",
        path=legacy("testcase", "zeroCase"),
        action="get zero test cases",
        params=(
            number("productID", "Product ID", required=True),
            number("branchID", "Branch ID"),
            string("orderBy", "Sort order"),
            number("objectID", "Object ID"),
            *_paging(),
        ),
    ),
)


def register(registry):
    for group in (CRUD_TOOLS, BATCH_TOOLS, LINK_TOOLS, TRANSFER_TOOLS, SCENE_TOOLS, REPORT_TOOLS):
        registry.add_all(group)
