"""Personnel tools: accessible people, investment and object whitelists."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import BODY, QUERY, ToolSpec, array, legacy, number, string

OBJECT_TYPES = ("program", "project", "product", "sprint")
ORIGINS = ("project", "program", "programproject")

TOOLS = (
    ToolSpec(
        name="get_accessible_personnel",
        description="Get accessible personnel list",
        path=legacy("personnel", "accessible"),
        params=(
            number("programID", "Program ID"),
            number("deptID", "Department ID"),
            string("browseType", "Browse type"),
            number("param", "Parameter value"),
            number("recTotal", "Total records"),
            number("recPerPage", "Records per page"),
            number("pageID", "Page ID"),
        ),
    ),
    ToolSpec(
        name="get_personnel_invest",
        description="Get personnel investment information",
        path=legacy("personnel", "invest"),
        params=(number("programID", "Program ID"),),
    ),
    ToolSpec(
        name="get_personnel_whitelist",
        description="Get personnel whitelist",
        path=legacy("personnel", "whitelist"),
        params=(
            number("objectID", "Object ID", required=True),
            string("module", "Module type", enum=("personnel", "program", "project", "product")),
            string("objectType", "Object type", enum=OBJECT_TYPES),
            string("orderBy", "Order by field"),
            number("recTotal", "Total records"),
            number("recPerPage", "Records per page"),
            number("pageID", "Page ID"),
            number("programID", "Program ID"),
            string("from", "Source", enum=ORIGINS),
        ),
    ),
    ToolSpec(
        name="add_personnel_whitelist",
        description="Add personnel to whitelist",
        method="POST",
        path=legacy("personnel", "addWhitelist"),
        into=QUERY,
        params=(
            number("objectID", "Object ID", required=True),
            number("deptID", "Department ID"),
            number("copyID", "Copy from ID"),
            string("objectType", "Object type", enum=OBJECT_TYPES),
            string("module", "Module"),
            number("programID", "Program ID"),
            string("from", "Source", enum=ORIGINS),
            array("users", "User IDs to add", into=BODY),
        ),
    ),
    ToolSpec(
        name="unbind_personnel_whitelist",
        description="Remove personnel from whitelist",
        path=legacy("personnel", "unbindWhitelist"),
        params=(number("id", "Whitelist entry ID", required=True),),
    ),
)


def register(registry):
    registry.add_all(TOOLS)
