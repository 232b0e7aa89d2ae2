"""zentao-mcp: MCP server exposing the ZenTao project management API as tools."""

from zentao_mcp.client import ZenTaoClient
from zentao_mcp.config import VERSION
from zentao_mcp.exceptions import ArgumentError, SetupError, ZenTaoError

__all__ = [
    "VERSION",
    "ZenTaoClient",
    "ZenTaoError",
    "SetupError",
    "ArgumentError",
]
