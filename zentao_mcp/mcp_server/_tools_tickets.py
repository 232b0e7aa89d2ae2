"""Ticket tools (REST-style /tickets)."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import ToolSpec, number, string

TOOLS = (
    ToolSpec(
        name="create_ticket",
        description="Create a new ticket in ZenTao",
        method="POST",
        path="/tickets",
        params=(
            number("product", "Product ID", required=True),
            number("module", "Module ID", required=True),
            string("title", "Ticket name", required=True),
            string("type", "Ticket type (code|data|stuck|security|affair)"),
            string("desc", "Ticket description"),
        ),
    ),
    ToolSpec(
        name="update_ticket",
        description="Update an existing ticket in ZenTao",
        method="PUT",
        path="/tickets/{id}",
        params=(
            number("id", "Ticket ID", required=True),
            number("product", "Product ID"),
            number("module", "Module ID"),
            string("title", "Ticket name"),
            string("type", "Ticket type (code|data|stuck|security|affair)"),
            string("desc", "Ticket description"),
        ),
    ),
    ToolSpec(
        name="delete_ticket",
        description="Delete a ticket from ZenTao",
        method="DELETE",
        path="/tickets/{id}",
        params=(number("id", "Ticket ID to delete", required=True),),
    ),
)


def register(registry):
    registry.add_all(TOOLS)
