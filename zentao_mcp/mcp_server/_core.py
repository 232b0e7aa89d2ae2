"""Core engine: parameter descriptors, tool specs, request building, dispatch."""

from __future__ import annotations

import math
import urllib.parse
from dataclasses import dataclass, field
from typing import Any, Callable

from zentao_mcp.api import _log_event
from zentao_mcp.exceptions import ArgumentError, ZenTaoError

PATH = "path"
QUERY = "query"
BODY = "body"

_MISSING = object()

_KIND_TYPES = {
    "string": (str,),
    "number": (int, float),
    "boolean": (bool,),
    "array": (list, tuple),
}

_CONVERTERS: dict[str, Callable[[Any], Any]] = {
    "int": int,
    "float": float,
    "raw": lambda v: v,
    "flag": lambda v: "1" if v else "0",
    "ints": lambda v: [int(x) for x in v],
}

_PREDICATES: dict[str, Callable[[Any], bool]] = {
    "positive": lambda v: v > 0,
    "non_negative": lambda v: v >= 0,
    "non_empty": lambda v: len(v) > 0,
    "priority": lambda v: 0 < v <= 9,
}


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Param:
    """One tool parameter and where its value travels on the wire.

    ``into`` is PATH, QUERY or BODY (or a tuple of them); when omitted it is
    derived from the tool: a ``{name}`` placeholder means PATH, then the
    tool's own ``into`` default applies, otherwise GET and DELETE tools put
    it in the query string and POST and PUT tools in the body.
    ``key`` overrides the wire name and may list several names.
    ``to`` selects the value converter, ``when`` an inclusion predicate.
    """

    name: str
    kind: str
    description: str = ""
    required: bool = False
    enum: tuple[str, ...] = ()
    items: str | None = None
    into: str | tuple[str, ...] | None = None
    key: str | tuple[str, ...] | None = None
    to: str | None = None
    when: str | None = None

    @property
    def keys(self) -> tuple[str, ...]:
        if self.key is None:
            return (self.name,)
        return (self.key,) if isinstance(self.key, str) else self.key

    def targets(self, spec: ToolSpec) -> tuple[str, ...]:
        if self.into is not None:
            return (self.into,) if isinstance(self.into, str) else self.into
        if "{" + self.name + "}" in spec.path:
            return (PATH,)
        if spec.into is not None:
            return (spec.into,)
        if spec.method in ("GET", "DELETE"):
            return (QUERY,)
        return (BODY,)

    def schema(self) -> dict:
        prop: dict[str, Any] = {"type": self.kind, "description": self.description}
        if self.enum:
            prop["enum"] = list(self.enum)
        if self.items:
            prop["items"] = {"type": self.items}
        return prop

    def convert(self, value):
        converter = self.to or ("int" if self.kind == "number" else "raw")
        return _CONVERTERS[converter](value)

    def accepts(self, value) -> bool:
        if self.when is None:
            return True
        return _PREDICATES[self.when](value)


def legacy(module: str, function: str) -> str:
    """Path for ZenTao's ``index.php?m=<module>&f=<function>&t=json`` endpoints."""
    return f"/index.php?m={module}&f={function}&t=json"


def number(name, description="", required=False, **kwargs) -> Param:
    return Param(name, "number", description, required, **kwargs)


def string(name, description="", required=False, **kwargs) -> Param:
    return Param(name, "string", description, required, **kwargs)


def boolean(name, description="", required=False, **kwargs) -> Param:
    return Param(name, "boolean", description, required, **kwargs)


def array(name, description="", required=False, **kwargs) -> Param:
    return Param(name, "array", description, required, **kwargs)


@dataclass(frozen=True)
class ToolSpec:
    """Immutable declaration of one MCP tool and the request it maps to."""

    name: str
    description: str
    method: str = "GET"
    path: str = ""
    params: tuple[Param, ...] = ()
    action: str | None = None
    into: str | None = None
    fixed_body: dict | None = field(default=None, hash=False)
    handler: Callable[[Any, dict], ToolResult] | None = field(default=None, hash=False)

    @property
    def action_text(self) -> str:
        return self.action or self.name.replace("_", " ")

    @property
    def has_body(self) -> bool:
        if self.fixed_body is not None:
            return True
        return any(BODY in p.targets(self) for p in self.params)

    def input_schema(self) -> dict:
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {p.name: p.schema() for p in self.params},
        }
        required = [p.name for p in self.params if p.required]
        if required:
            schema["required"] = required
        return schema


@dataclass(frozen=True)
class Request:
    method: str
    path: str
    body: dict | None = None


@dataclass(frozen=True)
class ToolResult:
    text: str
    is_error: bool = False


# ---------------------------------------------------------------------------
# Request building
# ---------------------------------------------------------------------------


def _is_kind(value, kind: str) -> bool:
    if kind in ("number", "string", "array") and isinstance(value, bool):
        return False
    return isinstance(value, _KIND_TYPES[kind])


def _extract(param: Param, arguments: dict):
    value = arguments.get(param.name)
    if value is None:
        if param.required:
            raise ArgumentError(f"missing required parameter: {param.name}")
        return _MISSING
    if not _is_kind(value, param.kind):
        raise ArgumentError(f"parameter {param.name} must be a {param.kind}")
    if param.kind == "number" and not math.isfinite(value):
        raise ArgumentError(f"parameter {param.name} must be a finite number")
    return value


def _query_value(value) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def build_request(spec: ToolSpec, arguments: dict | None) -> Request:
    """Translate a tool's arguments into the single request it issues.

    Absent optional arguments are omitted entirely; query parameters keep
    declaration order so identical arguments always yield identical paths.
    """
    arguments = arguments or {}
    path = spec.path
    query: list[tuple[str, str]] = []
    body = dict(spec.fixed_body) if spec.fixed_body is not None else None
    if body is None and spec.has_body:
        body = {}

    for param in spec.params:
        value = _extract(param, arguments)
        if value is _MISSING or not param.accepts(value):
            continue
        wire = param.convert(value)
        for target in param.targets(spec):
            if target == PATH:
                path = path.replace("{" + param.name + "}", str(wire))
            elif target == QUERY:
                query.extend((key, _query_value(wire)) for key in param.keys)
            else:
                for key in param.keys:
                    body[key] = wire

    if query:
        path += ("&" if "?" in path else "?") + urllib.parse.urlencode(query)
    return Request(spec.method, path, body)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def send(client, request: Request) -> bytes:
    """Issue a built request through the matching client verb."""
    if request.method == "GET":
        return client.get(request.path)
    if request.method == "POST":
        return client.post(request.path, request.body)
    if request.method == "PUT":
        return client.put(request.path, request.body)
    if request.method == "DELETE":
        return client.delete(request.path)
    raise ZenTaoError(f"unsupported method: {request.method}")


def run_tool(spec: ToolSpec, client, arguments: dict | None) -> ToolResult:
    """Run one tool invocation and wrap the outcome in a ToolResult.

    Backend and transport failures never escape: they come back as an
    error result reading ``Failed to <action>: <error>``.
    """
    arguments = arguments or {}
    if spec.handler is not None:
        return spec.handler(client, arguments)
    try:
        request = build_request(spec, arguments)
    except ArgumentError as e:
        _log_event("warn", "tools", "Rejected tool arguments", tool=spec.name, error=str(e))
        return ToolResult(f"Invalid arguments for {spec.name}: {e}", is_error=True)
    if client is None:
        return ToolResult(f"Failed to {spec.action_text}: ZenTao client is not configured", True)

    _log_event("debug", "tools", "Calling tool", tool=spec.name, method=request.method)
    try:
        raw = send(client, request)
    except ZenTaoError as e:
        _log_event("error", "tools", "Tool call failed", tool=spec.name, error=str(e))
        return ToolResult(f"Failed to {spec.action_text}: {e}", is_error=True)
    return ToolResult(raw.decode("utf-8", errors="replace"))
