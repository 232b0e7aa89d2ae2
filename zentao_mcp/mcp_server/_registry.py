"""Tool registry: holds every ToolSpec and the shared client they call."""

from __future__ import annotations

from collections.abc import Iterable

from zentao_mcp.api import _log_event
from zentao_mcp.mcp_server._core import ToolResult, ToolSpec, run_tool


class ToolRegistry:
    """Name -> ToolSpec mapping bound to one ZenTaoClient.

    Registration is pure bookkeeping: no request is made, so it works even
    when no client is configured.
    """

    def __init__(self, client=None):
        self.client = client
        self._tools: dict[str, ToolSpec] = {}

    def add(self, spec: ToolSpec) -> ToolSpec:
        if spec.name in self._tools:
            _log_event("warn", "registry", "Tool already registered, overwriting", tool=spec.name)
        self._tools[spec.name] = spec
        return spec

    def add_all(self, specs: Iterable[ToolSpec]) -> None:
        for spec in specs:
            self.add(spec)

    def get(self, name: str) -> ToolSpec | None:
        return self._tools.get(name)

    def names(self) -> list[str]:
        return list(self._tools)

    def specs(self) -> list[ToolSpec]:
        return list(self._tools.values())

    def __contains__(self, name) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def call(self, name: str, arguments: dict | None = None) -> ToolResult:
        spec = self._tools.get(name)
        if spec is None:
            return ToolResult(f"Unknown tool: {name}", is_error=True)
        return run_tool(spec, self.client, arguments)
