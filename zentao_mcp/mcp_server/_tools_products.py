"""Product tools (REST-style /products)."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import ToolSpec, number, string

TOOLS = (
    ToolSpec(
        name="create_product",
        description="Create a new product in ZenTao",
        method="POST",
        path="/products",
        params=(
            string("name", "Product name", required=True),
            string("code", "Product code", required=True),
            number("program", "Program ID"),
            number("line", "Product line"),
            number("PO", "Product Owner ID"),
            number("QD", "Quality Director ID"),
            number("RD", "Release Director ID"),
            string("type", "Product type (normal|branch)", enum=("normal", "branch")),
            string("desc", "Product description"),
            string("acl", "Access control (open|private)", enum=("open", "private")),
        ),
    ),
    ToolSpec(
        name="update_product",
        description="Update an existing product in ZenTao",
        method="PUT",
        path="/product/{id}",
        params=(
            number("id", "Product ID", required=True),
            string("name", "Product name"),
            string("code", "Product code"),
            string(
                "type",
                "Product type (normal|branch|platform)",
                enum=("normal", "branch", "platform"),
            ),
            number("line", "Product line"),
            number("program", "Program"),
            string("status", "Product status (normal|closed)", enum=("normal", "closed")),
            string("desc", "Product description"),
        ),
    ),
    ToolSpec(
        name="delete_product",
        description="Delete a product from ZenTao",
        method="DELETE",
        path="/product/{id}",
        params=(number("id", "Product ID to delete", required=True),),
    ),
)


def register(registry):
    registry.add_all(TOOLS)
