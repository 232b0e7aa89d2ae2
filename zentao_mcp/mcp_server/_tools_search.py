"""Search tools: search forms, saved queries and the full-text index."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import ToolSpec, legacy, number, string

PAGE_MODES = ("new20", "old20")


def _search(function):
    return legacy("search", function)


def _mode():
    return string("mode", "Mode: new20 (new page) | old20 (old page)", enum=PAGE_MODES)


def _module():
    return string("module", "Module name", required=True)


FORM_TOOLS = (
    ToolSpec(
        name="search_build_form",
        description="Build search form",
        path=_search("buildForm"),
        action="build form",
        params=(_module(), _mode()),
    ),
    ToolSpec(
        name="search_build_old_form",
        description="Build old search form",
        path=_search("buildOldForm"),
        action="build old form",
        params=(_module(),),
    ),
)

QUERY_TOOLS = (
    ToolSpec(
        name="search_build_query",
        description="Build search query",
        method="POST",
        path=_search("buildQuery"),
        action="build query",
        params=(_mode(),),
    ),
    ToolSpec(
        name="search_build_old_query",
        description="Build old search query",
        method="POST",
        path=_search("buildOldQuery"),
        action="build old query",
    ),
    ToolSpec(
        name="search_save_query",
        description="Save search query",
        method="POST",
        path=_search("saveQuery"),
        action="save query",
        params=(_module(), string("onMenuBar", "On menu bar flag")),
    ),
    ToolSpec(
        name="search_save_old_query",
        description="Save old search query",
        method="POST",
        path=_search("saveOldQuery"),
        action="save old query",
        params=(_module(), string("onMenuBar", "On menu bar flag")),
    ),
    ToolSpec(
        name="search_delete_query",
        description="Delete search query",
        path=_search("deleteQuery"),
        action="delete query",
        params=(number("queryID", "Query ID", required=True),),
    ),
    ToolSpec(
        name="search_ajax_get_query",
        description="Get search query details",
        path=_search("ajaxGetQuery"),
        action="get query",
        params=(_module(), number("queryID", "Query ID", required=True)),
    ),
    ToolSpec(
        name="search_ajax_remove_menu",
        description="Remove query from menu",
        path=_search("ajaxRemoveMenu"),
        action="remove menu",
        params=(number("queryID", "Query ID", required=True),),
    ),
)

INDEX_TOOLS = (
    ToolSpec(
        name="search_build_index",
        description="Build search index",
        method="POST",
        path=_search("buildIndex"),
        action="build index",
        params=(
            string("mode", "Mode: show|build", enum=("show", "build")),
            string("type", "Type"),
            number("lastID", "Last ID"),
        ),
    ),
    ToolSpec(
        name="search_index",
        description="Search index",
        method="POST",
        path=_search("index"),
        action="index search",
        params=(number("recTotal", "Total records"), number("pageID", "Page ID")),
    ),
)


def register_form_tools(registry):
    registry.add_all(FORM_TOOLS)


def register_query_tools(registry):
    registry.add_all(QUERY_TOOLS)


def register_index_tools(registry):
    registry.add_all(INDEX_TOOLS)


def register(registry):
    register_form_tools(registry)
    register_query_tools(registry)
    register_index_tools(registry)
