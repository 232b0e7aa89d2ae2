"""
Output formatting for zentao-mcp CLI commands: JSON (default) or readable tables.
"""

import json
import re

_CONTROL_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]|[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def _trunc(s, maxlen):
    """Truncate string with ellipsis indicator."""
    if not s:
        return ""
    return s[: maxlen - 1] + "…" if len(s) > maxlen else s


def _sanitize_str(s):
    """Strip ANSI escape sequences and control chars from table output."""
    if not s:
        return s
    return _CONTROL_RE.sub("", str(s))


def _table(columns, rows, footer=None):
    """Build a formatted table string.
    columns: list of (name, width) tuples. Last column has no width (fills).
    rows: list of tuples matching columns."""
    header = " ".join(
        name if i == len(columns) - 1 else f"{name:<{width}}"
        for i, (name, width) in enumerate(columns)
    )
    lines = [header, "-" * max(len(header), 90)]
    for row in rows:
        parts = []
        for i, val in enumerate(row):
            safe = _sanitize_str(val) if isinstance(val, str) else str(val)
            parts.append(safe if i == len(columns) - 1 else f"{safe:<{columns[i][1]}}")
        lines.append(" ".join(parts))
    if footer:
        lines.append(f"\n{footer}")
    return "\n".join(lines)


def output(data, formatter=None, fmt="json"):
    """Print data in the requested format."""
    if fmt == "table" and formatter:
        print(formatter(data))
    else:
        print(json.dumps(data, indent=2, ensure_ascii=False))


def tool_rows(specs):
    """Flatten ToolSpecs into plain dicts for JSON output."""
    return [
        {
            "name": s.name,
            "description": s.description,
            "method": s.method if s.handler is None else None,
            "path": s.path or None,
            "required": [p.name for p in s.params if p.required],
        }
        for s in specs
    ]


def format_tools_table(tools):
    if not tools:
        return "No tools registered."
    cols = [("Tool", 40), ("Method", 7), ("Description", 0)]
    rows = [
        (_trunc(t["name"], 40), t["method"] or "-", _trunc(t["description"], 70)) for t in tools
    ]
    return _table(cols, rows, f"Total: {len(tools)} tools")


def format_schema_table(tool):
    """Parameter listing for a single tool."""
    schema = tool["inputSchema"]
    required = set(schema.get("required", []))
    cols = [("Parameter", 24), ("Type", 8), ("Req", 4), ("Description", 0)]
    rows = []
    for name, prop in schema["properties"].items():
        desc = prop.get("description", "")
        if prop.get("enum"):
            desc += f" [{', '.join(prop['enum'])}]"
        rows.append((name, prop["type"], "yes" if name in required else "", desc))
    header = f"{tool['name']}: {tool['description']}\n\n"
    if not rows:
        return header + "No parameters."
    return header + _table(cols, rows)


def format_resources_table(resources):
    if not resources:
        return "No resources."
    cols = [("URI", 38), ("Name", 0)]
    rows = [(r["uri"], r["name"]) for r in resources]
    return _table(cols, rows, f"Total: {len(resources)} resources")


def format_result_text(text, fmt="json"):
    """Pretty-print a raw ZenTao response when it is JSON, else return it as-is."""
    if fmt != "json":
        return text
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return text
    return json.dumps(data, indent=2, ensure_ascii=False)
