"""Module tree tools (m=tree): browsing, editing, ordering and option menus."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import ToolSpec, legacy, number, string

VIEW_TYPES = ("story", "bug", "case", "doc")


def _tree(function):
    return legacy("tree", function)


def _view_type():
    return string("viewType", "View type: story|bug|case|doc", enum=VIEW_TYPES)


BROWSE_TOOLS = (
    ToolSpec(
        name="tree_browse",
        description="Browse tree structure",
        path=_tree("browse"),
        action="browse tree",
        params=(
            number("rootID", "Root ID"),
            _view_type(),
            number("currentModuleID", "Current module ID"),
            string("branch", "Branch"),
            string("from", "From filter"),
        ),
    ),
    ToolSpec(
        name="tree_browse_task",
        description="Browse tree tasks",
        path=_tree("browseTask"),
        action="browse tree tasks",
        params=(
            number("rootID", "Root ID"),
            number("productID", "Product ID"),
            number("currentModuleID", "Current module ID"),
        ),
    ),
)

EDIT_TOOLS = (
    ToolSpec(
        name="tree_edit",
        description="Edit tree module",
        method="POST",
        path=_tree("edit"),
        action="edit tree module",
        params=(
            number("moduleID", "Module ID", required=True),
            string("type", "Module type"),
            string("branch", "Branch"),
        ),
    ),
    ToolSpec(
        name="tree_fix",
        description="Fix tree module",
        method="POST",
        path=_tree("fix"),
        action="fix tree module",
        params=(number("rootID", "Root ID"), string("type", "Module type")),
    ),
)

MANAGEMENT_TOOLS = (
    ToolSpec(
        name="tree_update_order",
        description="Update tree module order",
        method="POST",
        path=_tree("updateOrder"),
        action="update order",
        params=(number("rootID", "Root ID"), _view_type(), number("moduleID", "Module ID")),
    ),
    ToolSpec(
        name="tree_manage_child",
        description="Manage tree child modules",
        method="POST",
        path=_tree("manageChild"),
        action="manage child",
        params=(
            number("rootID", "Root ID", required=True),
            _view_type(),
            string("oldPage", "Old page: yes|no", enum=("yes", "no")),
        ),
    ),
    ToolSpec(
        name="tree_view_history",
        description="View tree history",
        path=_tree("viewHistory"),
        action="view history",
        params=(number("productID", "Product ID", required=True),),
    ),
    ToolSpec(
        name="tree_delete",
        description="Delete tree module",
        path=_tree("delete"),
        action="delete tree module",
        params=(
            number("moduleID", "Module ID", required=True),
            string("confirm", "Confirmation: yes|no", enum=("yes", "no")),
        ),
    ),
    ToolSpec(
        name="tree_ajax_create_module",
        description="Create tree module",
        method="POST",
        path=_tree("ajaxCreateModule"),
        action="create module",
    ),
)

OPTION_TOOLS = (
    ToolSpec(
        name="tree_ajax_get_option_menu",
        description="Get tree option menu",
        path=_tree("ajaxGetOptionMenu"),
        action="get option menu",
        params=(
            number("rootID", "Root ID"),
            _view_type(),
            string("branch", "Branch"),
            number("rootModuleID", "Root module ID"),
            string("returnType", "Return type"),
            string("fieldID", "Field ID"),
            string("extra", "Extra parameters"),
            number("currentModuleID", "Current module ID"),
            string("grade", "Grade"),
        ),
    ),
    ToolSpec(
        name="tree_ajax_get_drop_menu",
        description="Get tree drop menu",
        path=_tree("ajaxGetDropMenu"),
        action="get drop menu",
        params=(
            number("rootID", "Root ID"),
            string("module", "Module"),
            string("method", "Method"),
            string("extra", "Extra parameters"),
        ),
    ),
    ToolSpec(
        name="tree_ajax_get_modules",
        description="Get tree modules",
        path=_tree("ajaxGetModules"),
        action="get modules",
        params=(
            number("productID", "Product ID"),
            _view_type(),
            string("branch", "Branch"),
            number("number", "Number"),
            number("currentModuleID", "Current module ID"),
            string("from", "From: showImport"),
        ),
    ),
    ToolSpec(
        name="tree_ajax_get_son_modules",
        description="Get son modules",
        path=_tree("ajaxGetSonModules"),
        action="get son modules",
        params=(
            number("moduleID", "Module ID"),
            number("rootID", "Root ID"),
            string("type", "Module type"),
        ),
    ),
)


def register_browse_tools(registry):
    registry.add_all(BROWSE_TOOLS)


def register_edit_tools(registry):
    registry.add_all(EDIT_TOOLS)


def register_management_tools(registry):
    registry.add_all(MANAGEMENT_TOOLS)


def register_option_tools(registry):
    registry.add_all(OPTION_TOOLS)


def register(registry):
    register_browse_tools(registry)
    register_edit_tools(registry)
    register_management_tools(registry)
    register_option_tools(registry)
