"""Read-only ``zentao://`` resources backed by REST-style GET endpoints."""

from __future__ import annotations

import re
from dataclasses import dataclass

from zentao_mcp.api import _log_event
from zentao_mcp.exceptions import ZenTaoError

MIME_TYPE = "application/json"

_PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")


@dataclass(frozen=True)
class ResourceSpec:
    """One resource URI (or URI template) and the GET path it reads."""

    uri: str
    name: str
    description: str
    path: str

    @property
    def is_template(self) -> bool:
        return "{" in self.uri

    @property
    def pattern(self) -> re.Pattern:
        parts = _PLACEHOLDER_RE.split(self.uri)
        # split() alternates literal text and placeholder names
        regex = "".join(
            re.escape(part) if i % 2 == 0 else f"(?P<{part}>\\d+)" for i, part in enumerate(parts)
        )
        return re.compile(regex + r"\Z")

    def match(self, uri: str) -> str | None:
        """Return the backend path for ``uri``, or None when it does not match."""
        if not self.is_template:
            return self.path if uri == self.uri else None
        m = self.pattern.match(uri)
        if m is None:
            return None
        return self.path.format(**m.groupdict())


RESOURCES = (
    ResourceSpec(
        "zentao://products", "ZenTao Products", "List of all products in ZenTao", "/products"
    ),
    ResourceSpec(
        "zentao://projects", "ZenTao Projects", "List of all projects in ZenTao", "/projects"
    ),
    ResourceSpec("zentao://bugs", "ZenTao Bugs", "List of all bugs in ZenTao", "/bugs"),
    ResourceSpec("zentao://users", "ZenTao Users", "List of all users in ZenTao", "/users"),
    ResourceSpec("zentao://user", "My Profile", "Current user's profile", "/user"),
)

TEMPLATES = (
    ResourceSpec(
        "zentao://product/{id}", "ZenTao Product Details", "Details of a product", "/products/{id}"
    ),
    ResourceSpec(
        "zentao://products/{id}/stories",
        "Product Stories",
        "Stories for a specific product",
        "/products/{id}/stories",
    ),
    ResourceSpec(
        "zentao://products/{id}/bugs",
        "Product Bugs",
        "Bugs for a specific product",
        "/products/{id}/bugs",
    ),
    ResourceSpec(
        "zentao://project/{id}", "ZenTao Project Details", "Details of a project", "/projects/{id}"
    ),
    ResourceSpec(
        "zentao://projects/{id}/executions",
        "ZenTao Project Executions",
        "Executions of a specific project",
        "/projects/{id}/executions",
    ),
    ResourceSpec(
        "zentao://projects/{id}/stories",
        "ZenTao Project Stories",
        "Stories linked to a specific project",
        "/projects/{id}/stories",
    ),
    ResourceSpec(
        "zentao://execution/{id}",
        "ZenTao Execution Details",
        "Details of an execution",
        "/executions/{id}",
    ),
    ResourceSpec(
        "zentao://executions/{id}/tasks",
        "Execution Tasks",
        "Tasks for a specific execution",
        "/executions/{id}/tasks",
    ),
    ResourceSpec("zentao://story/{id}", "Story Details", "Details of a story", "/stories/{id}"),
    ResourceSpec("zentao://task/{id}", "Task Details", "Details of a task", "/tasks/{id}"),
    ResourceSpec("zentao://bug/{id}", "Bug Details", "Details of a bug", "/bugs/{id}"),
    ResourceSpec("zentao://user/{id}", "User Details", "Details of a user", "/users/{id}"),
)


def resolve(uri: str) -> str:
    """Map a resource URI to the backend path it reads.

    Raises ZenTaoError for URIs outside the catalogue.
    """
    uri = str(uri).rstrip("/")
    for spec in RESOURCES + TEMPLATES:
        path = spec.match(uri)
        if path is not None:
            return path
    raise ZenTaoError(f"Unknown resource URI: {uri}")


def read_resource(client, uri: str) -> str:
    path = resolve(uri)
    if client is None:
        raise ZenTaoError(f"Failed to read {uri}: ZenTao client is not configured")
    _log_event("debug", "resources", "Reading resource", uri=str(uri), path=path)
    try:
        raw = client.get(path)
    except ZenTaoError as e:
        _log_event("error", "resources", "Resource read failed", uri=str(uri), error=str(e))
        raise ZenTaoError(f"Failed to read {uri}: {e}") from e
    return raw.decode("utf-8", errors="replace")
