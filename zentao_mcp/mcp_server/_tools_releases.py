"""Release listings for projects and products."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import ToolSpec, number


def _window():
    return (
        number("limit", "Maximum number of releases to return (default: 100)"),
        number("offset", "Offset for pagination (default: 0)"),
    )


TOOLS = (
    ToolSpec(
        name="get_project_releases",
        description="Get releases for a specific project",
        path="/projects/{project_id}/releases",
        params=(number("project_id", "Project ID", required=True), *_window()),
    ),
    ToolSpec(
        name="get_product_releases",
        description="Get releases for a specific product",
        path="/products/{product_id}/releases",
        params=(number("product_id", "Product ID", required=True), *_window()),
    ),
)


def register(registry):
    registry.add_all(TOOLS)
