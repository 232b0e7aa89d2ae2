"""MCP server exposing the ZenTao API as tools.

Package structure:
  __init__.py        - domain module list, build_registry(), main()
  __main__.py        - ``python -m zentao_mcp.mcp_server`` entry point
  _core.py           - Param/ToolSpec declarations, request building, dispatch
  _registry.py       - ToolRegistry (name -> ToolSpec, bound to one client)
  _server.py         - low-level MCP server wiring and the stdio runner
  _resources.py      - zentao:// resources and resource templates
  _prompts.py        - prompt templates
  _tools_auth.py     - zentao_login / zentao_login_session
  _tools_<domain>.py - one declarative tool table per ZenTao domain

Run: python -m zentao_mcp.mcp_server
"""

from __future__ import annotations

from zentao_mcp.api import _log_event
from zentao_mcp.mcp_server import (
    _tools_ai,
    _tools_aiapp,
    _tools_auth,
    _tools_branches,
    _tools_bugs,
    _tools_builds,
    _tools_designs,
    _tools_doc,
    _tools_executions,
    _tools_feedbacks,
    _tools_kanban,
    _tools_personnel,
    _tools_plans,
    _tools_products,
    _tools_projects,
    _tools_releases,
    _tools_requirements,
    _tools_search,
    _tools_stakeholders,
    _tools_stories,
    _tools_tasks,
    _tools_testcases,
    _tools_testtasks,
    _tools_tickets,
    _tools_tree,
    _tools_users,
    _tools_zanode,
)
from zentao_mcp.mcp_server._core import ToolResult, ToolSpec, build_request, run_tool  # noqa: F401
from zentao_mcp.mcp_server._registry import ToolRegistry

# Registration order is also the order tools are listed to MCP clients.
DOMAIN_MODULES = (
    _tools_auth,
    _tools_products,
    _tools_projects,
    _tools_executions,
    _tools_stories,
    _tools_tasks,
    _tools_bugs,
    _tools_builds,
    _tools_plans,
    _tools_designs,
    _tools_requirements,
    _tools_testcases,
    _tools_tickets,
    _tools_feedbacks,
    _tools_kanban,
    _tools_doc,
    _tools_ai,
    _tools_aiapp,
    _tools_tree,
    _tools_personnel,
    _tools_stakeholders,
    _tools_search,
    _tools_users,
    _tools_branches,
    _tools_zanode,
    _tools_releases,
    _tools_testtasks,
)


def build_registry(client=None) -> ToolRegistry:
    """Register every domain's tools against one shared client.

    Registration performs no I/O, so it succeeds with ``client=None``; the
    auth tools are skipped in that case and data tools report the missing
    client when called.
    """
    registry = ToolRegistry(client)
    for module in DOMAIN_MODULES:
        module.register(registry)
    _log_event("info", "server", "Tools registered", count=len(registry))
    return registry


def main():
    """Run the MCP server (stdio transport)."""
    from zentao_mcp.mcp_server._server import run

    run()
