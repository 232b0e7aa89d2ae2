"""AI app tools (the user-facing side of the AI module)."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import ToolSpec, legacy, number, string


def _aiapp(function):
    return legacy("aiapp", function)


VIEW_TOOLS = (
    ToolSpec(
        name="aiapp_view",
        description="View AI app",
        path=_aiapp("view"),
        action="view AI app",
        params=(string("id", "App ID"),),
    ),
)

MINI_PROGRAM_TOOLS = (
    ToolSpec(
        name="aiapp_browse_mini_program",
        description="Browse AI mini programs",
        path=_aiapp("browseMiniProgram"),
        action="browse mini programs",
        params=(string("id", "ID filter"),),
    ),
    ToolSpec(
        name="aiapp_mini_program_chat",
        description="Mini program chat",
        path=_aiapp("miniProgramChat"),
        action="start mini program chat",
        params=(string("id", "Chat ID"),),
    ),
    ToolSpec(
        name="aiapp_collect_mini_program",
        description="Collect mini program",
        path=_aiapp("collectMiniProgram"),
        action="collect mini program",
        params=(string("appID", "App ID"), string("delete", "Delete flag")),
    ),
)

SQUARE_TOOLS = (
    ToolSpec(
        name="aiapp_square",
        description="Browse AI app square",
        path=_aiapp("square"),
        action="browse square",
        params=(
            string("category", "Category filter"),
            number("recTotal", "Total records"),
            number("recPerPage", "Records per page"),
            number("pageID", "Page ID"),
        ),
    ),
)

MODEL_TOOLS = (
    ToolSpec(
        name="aiapp_models",
        description="Get AI models",
        path=_aiapp("models"),
        action="get AI models",
    ),
)

CONVERSATION_TOOLS = (
    ToolSpec(
        name="aiapp_conversation",
        description="AI app conversation",
        method="POST",
        path=_aiapp("conversation"),
        action="start conversation",
        params=(
            string(
                "chat",
                "Chat ID - _ will be replaced with -, if set to NEW, open a new chat",
                required=True,
            ),
            string("params", "Parameters as JSON string, base64 encoded"),
        ),
    ),
)


def register_view_tools(registry):
    registry.add_all(VIEW_TOOLS)


def register_mini_program_tools(registry):
    registry.add_all(MINI_PROGRAM_TOOLS)


def register_square_tools(registry):
    registry.add_all(SQUARE_TOOLS)


def register_model_tools(registry):
    registry.add_all(MODEL_TOOLS)


def register_conversation_tools(registry):
    registry.add_all(CONVERSATION_TOOLS)


def register(registry):
    register_view_tools(registry)
    register_mini_program_tools(registry)
    register_square_tools(registry)
    register_model_tools(registry)
    register_conversation_tools(registry)
