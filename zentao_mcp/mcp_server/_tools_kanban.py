"""Kanban tools: spaces, boards, regions, lanes, columns and cards."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import BODY, QUERY, ToolSpec, legacy, number, string

_ORIGINS = ("kanban", "execution")


def _kanban(function):
    return legacy("kanban", function)


def _paging():
    return (
        number("recTotal", "Total records"),
        number("recPerPage", "Records per page"),
        number("pageID", "Page ID"),
    )


SPACE_TOOLS = (
    ToolSpec(
        name="get_kanban_spaces",
        description="Get kanban spaces",
        path=_kanban("space"),
        params=(
            string(
                "browseType",
                "Browse type",
                enum=("involved", "cooperation", "public", "private"),
            ),
            *_paging(),
        ),
    ),
    ToolSpec(
        name="create_kanban_space",
        description="Create a new kanban space",
        method="POST",
        path=_kanban("createSpace"),
        params=(
            string("type", "Space type", required=True, into=(QUERY, BODY)),
            string("name", "Space name", required=True),
            string("desc", "Space description"),
        ),
    ),
    ToolSpec(
        name="edit_kanban_space",
        description="Edit a kanban space",
        method="POST",
        path=_kanban("editSpace"),
        params=(
            number("spaceID", "Space ID", required=True, into=QUERY),
            string("name", "Space name"),
            string("desc", "Space description"),
        ),
    ),
    ToolSpec(
        name="activate_kanban_space",
        description="Activate a kanban space",
        method="POST",
        path=_kanban("activateSpace"),
        into=QUERY,
        fixed_body={},
        params=(number("spaceID", "Space ID", required=True),),
    ),
    ToolSpec(
        name="close_kanban_space",
        description="Close a kanban space",
        method="POST",
        path=_kanban("closeSpace"),
        into=QUERY,
        fixed_body={},
        params=(number("spaceID", "Space ID", required=True),),
    ),
    ToolSpec(
        name="delete_kanban_space",
        description="Delete a kanban space",
        path=_kanban("deleteSpace"),
        params=(number("spaceID", "Space ID", required=True),),
    ),
)

BOARD_TOOLS = (
    ToolSpec(
        name="create_kanban",
        description="Create a new kanban board",
        method="POST",
        path=_kanban("create"),
        into=QUERY,
        params=(
            number("spaceID", "Space ID", required=True),
            string("type", "Kanban type"),
            number("copyKanbanID", "Copy from kanban ID"),
            string("extra", "Extra parameters"),
            string("name", "Kanban name", required=True, into=BODY),
            string("desc", "Kanban description", into=BODY),
        ),
    ),
    ToolSpec(
        name="edit_kanban",
        description="Edit a kanban board",
        method="POST",
        path=_kanban("edit"),
        params=(
            number("kanbanID", "Kanban ID", required=True, into=QUERY),
            string("name", "Kanban name"),
            string("desc", "Kanban description"),
        ),
    ),
    ToolSpec(
        name="view_kanban",
        description="View a kanban board",
        path=_kanban("view"),
        params=(
            number("kanbanID", "Kanban ID", required=True),
            string("regionID", "Region ID"),
        ),
    ),
    ToolSpec(
        name="delete_kanban",
        description="Delete a kanban board",
        path=_kanban("delete"),
        params=(number("kanbanID", "Kanban ID", required=True),),
    ),
)

REGION_TOOLS = (
    ToolSpec(
        name="create_kanban_region",
        description="Create a kanban region",
        method="POST",
        path=_kanban("createRegion"),
        into=QUERY,
        params=(
            number("kanbanID", "Kanban ID", required=True),
            string("from", "Source", enum=_ORIGINS),
            string("name", "Region name", required=True, into=BODY),
            string("desc", "Region description", into=BODY),
        ),
    ),
    ToolSpec(
        name="edit_kanban_region",
        description="Edit a kanban region",
        method="POST",
        path=_kanban("editRegion"),
        params=(
            number("regionID", "Region ID", required=True, into=QUERY),
            string("name", "Region name"),
            string("desc", "Region description"),
        ),
    ),
    ToolSpec(
        name="delete_kanban_region",
        description="Delete a kanban region",
        path=_kanban("deleteRegion"),
        params=(number("regionID", "Region ID", required=True),),
    ),
    ToolSpec(
        name="create_kanban_lane",
        description="Create a kanban lane",
        method="POST",
        path=_kanban("createLane"),
        into=QUERY,
        params=(
            number("kanbanID", "Kanban ID", required=True),
            number("regionID", "Region ID", required=True),
            string("from", "Source", enum=_ORIGINS),
            string("name", "Lane name", required=True, into=BODY),
            string("color", "Lane color", into=BODY),
        ),
    ),
    ToolSpec(
        name="delete_kanban_lane",
        description="Delete a kanban lane",
        path=_kanban("deleteLane"),
        params=(
            number("regionID", "Region ID", required=True),
            number("laneID", "Lane ID", required=True),
        ),
    ),
)

COLUMN_TOOLS = (
    ToolSpec(
        name="create_kanban_column",
        description="Create a kanban column",
        method="POST",
        path=_kanban("createColumn"),
        params=(
            number("fromColumnID", "Source column ID", required=True, into=QUERY),
            string(
                "position", "Position", required=True, enum=("left", "right"), into=(QUERY, BODY)
            ),
            string("name", "Column name", required=True),
            number("limit", "WIP limit"),
        ),
    ),
    ToolSpec(
        name="split_kanban_column",
        description="Split a kanban column",
        method="POST",
        path=_kanban("splitColumn"),
        params=(
            number("columnID", "Column ID", required=True, into=QUERY),
            string("name", "New column name", required=True),
        ),
    ),
    ToolSpec(
        name="archive_kanban_column",
        description="Archive a kanban column",
        path=_kanban("archiveColumn"),
        params=(number("columnID", "Column ID", required=True),),
    ),
    ToolSpec(
        name="delete_kanban_column",
        description="Delete a kanban column",
        path=_kanban("deleteColumn"),
        params=(number("columnID", "Column ID", required=True),),
    ),
)


def _card_fields(required):
    return (
        string("name", "Card name", required=required),
        string("desc", "Card description"),
        number("assignedTo", "Assigned to user ID"),
        number("pri", "Priority"),
        string("color", "Card color"),
    )


def _card_id():
    return number("cardID", "Card ID", required=True)


CARD_TOOLS = (
    ToolSpec(
        name="create_kanban_card",
        description="Create a kanban card",
        method="POST",
        path=_kanban("createCard"),
        params=(
            number("kanbanID", "Kanban ID", required=True, into=QUERY),
            number("regionID", "Region ID", required=True, into=QUERY),
            number("groupID", "Group ID", required=True, into=QUERY),
            number("columnID", "Column ID", required=True, into=QUERY),
            *_card_fields(True),
        ),
    ),
    ToolSpec(
        name="edit_kanban_card",
        description="Edit a kanban card",
        method="POST",
        path=_kanban("editCard"),
        params=(number("cardID", "Card ID", required=True, into=QUERY), *_card_fields(False)),
    ),
    ToolSpec(
        name="view_kanban_card",
        description="View a kanban card",
        path=_kanban("viewCard"),
        params=(_card_id(),),
    ),
    ToolSpec(
        name="move_kanban_card",
        description="Move a kanban card",
        method="POST",
        path=_kanban("moveCard"),
        into=QUERY,
        fixed_body={},
        params=(
            _card_id(),
            number("fromColID", "From column ID", required=True),
            number("toColID", "To column ID", required=True),
            number("fromLaneID", "From lane ID", required=True),
            number("toLaneID", "To lane ID", required=True),
            number("kanbanID", "Kanban ID", required=True),
            string("showModal", "Show modal"),
        ),
    ),
    ToolSpec(
        name="finish_kanban_card",
        description="Finish a kanban card",
        path=_kanban("finishCard"),
        params=(_card_id(),),
    ),
    ToolSpec(
        name="activate_kanban_card",
        description="Activate a kanban card",
        method="POST",
        path=_kanban("activateCard"),
        into=QUERY,
        fixed_body={},
        params=(_card_id(),),
    ),
    ToolSpec(
        name="archive_kanban_card",
        description="Archive a kanban card",
        path=_kanban("archiveCard"),
        params=(_card_id(),),
    ),
    ToolSpec(
        name="delete_kanban_card",
        description="Delete a kanban card",
        path=_kanban("deleteCard"),
        params=(_card_id(),),
    ),
    ToolSpec(
        name="import_cards_from_plan",
        description="Import cards from a plan",
        method="POST",
        path=_kanban("importPlan"),
        into=QUERY,
        params=(
            number("kanbanID", "Kanban ID", required=True),
            number("regionID", "Region ID", required=True),
            number("groupID", "Group ID", required=True),
            number("columnID", "Column ID", required=True),
            number("selectedProductID", "Selected product ID", required=True),
            *_paging(),
        ),
    ),
    ToolSpec(
        name="set_kanban_card_color",
        description="Set kanban card color",
        path=_kanban("setCardColor"),
        params=(_card_id(), string("color", "Color", required=True)),
    ),
)

LOOKUP_TOOLS = (
    ToolSpec(
        name="get_kanban_lanes",
        description="Get kanban lanes",
        path=_kanban("ajaxGetLanes"),
        params=(
            number("regionID", "Region ID", required=True),
            string("type", "Type", enum=("all", "story", "task", "bug")),
            string("field", "Field"),
            string("pageType", "Page type"),
        ),
    ),
    ToolSpec(
        name="get_kanban_columns",
        description="Get kanban columns",
        path=_kanban("ajaxGetColumns"),
        params=(number("laneID", "Lane ID", required=True),),
    ),
)


def register(registry):
    registry.add_all(SPACE_TOOLS)
    registry.add_all(BOARD_TOOLS)
    registry.add_all(REGION_TOOLS)
    registry.add_all(COLUMN_TOOLS)
    registry.add_all(CARD_TOOLS)
    registry.add_all(LOOKUP_TOOLS)
