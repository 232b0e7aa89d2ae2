"""
zentao-mcp: run the ZenTao MCP server, or drive its tools from the shell
"""

import argparse
import json
import sys

from zentao_mcp import config
from zentao_mcp.exceptions import ArgumentError, SetupError, ZenTaoError
from zentao_mcp.formatters import (
    format_resources_table,
    format_result_text,
    format_schema_table,
    format_tools_table,
    output,
    tool_rows,
)

HELP_TEXT = """\
Usage: zentao-mcp <command> [args...]

Global flags:
  --format table          Output as readable text instead of JSON (default: json)
  --verbose, -v           Log HTTP requests to stderr (ZENTAO_LOG_LEVEL=debug)
  --version               Show version number

Commands:
  serve                   - Run the MCP server over stdio (default when no command)
  tools                   - List every registered tool
    --search <text>         Only tools whose name contains <text>
  schema <tool>           - Show the input schema of one tool
  call <tool> [json]      - Invoke one tool with a JSON object of arguments
  resources               - List zentao:// resources and resource templates
  read <uri>              - Read one zentao:// resource
  configure               - Save connection settings to .env
    --base-url <url>        ZenTao base URL (e.g. http://zentao.local)
    --auth-method <m>       none, app or session
    --code <code>           App code (app auth)
    --key <key>             App key (app auth)
  version                 - Show version number

Environment (or .env):
  ZENTAO_BASE_URL, ZENTAO_AUTH_METHOD, ZENTAO_APP_CODE, ZENTAO_APP_KEY,
  ZENTAO_LOG_LEVEL (debug|info|warn|error), ZENTAO_LOG_JSON (true/false)
"""


# ---------------------------------------------------------------------------
# Global flag extraction (before argparse, so --format works after subcommand)
# ---------------------------------------------------------------------------


def _extract_global_flags(argv):
    """Extract global flags from argv regardless of position.

    Returns (format_str, verbose, remaining_argv). Handles --version directly.
    """
    fmt = "json"
    verbose = False
    remaining = []
    i = 0
    while i < len(argv):
        if argv[i] == "--version":
            print(f"zentao-mcp {config.VERSION}")
            sys.exit(0)
        elif argv[i] in ("--verbose", "-v"):
            verbose = True
        elif argv[i] == "--format" and i + 1 < len(argv):
            fmt = argv[i + 1]
            if fmt not in ("json", "table"):
                raise ZenTaoError(f"[ERROR] Invalid format '{fmt}'. Use: json, table")
            i += 1
        else:
            remaining.append(argv[i])
        i += 1
    return fmt, verbose, remaining


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


class _SubcommandParser(argparse.ArgumentParser):
    """Subparser that raises ZenTaoError instead of printing full help text."""

    def error(self, message):
        raise ZenTaoError(f"[ERROR] {message}")


def build_parser():
    parser = _SubcommandParser(prog="zentao-mcp", add_help=False)
    parser.add_argument("--help", "-h", action="store_true", dest="show_help")
    sub = parser.add_subparsers(dest="command", parser_class=_SubcommandParser)

    sub.add_parser("serve").set_defaults(func=cmd_serve)

    p = sub.add_parser("tools")
    p.add_argument("--search")
    p.set_defaults(func=cmd_tools)

    p = sub.add_parser("schema")
    p.add_argument("tool")
    p.set_defaults(func=cmd_schema)

    p = sub.add_parser("call")
    p.add_argument("tool")
    p.add_argument("json_args", nargs="?", default="{}")
    p.set_defaults(func=cmd_call)

    sub.add_parser("resources").set_defaults(func=cmd_resources)

    p = sub.add_parser("read")
    p.add_argument("uri")
    p.set_defaults(func=cmd_read)

    p = sub.add_parser("configure")
    p.add_argument("--base-url", dest="base_url")
    p.add_argument("--auth-method", dest="auth_method", choices=config.AUTH_METHODS)
    p.add_argument("--code")
    p.add_argument("--key")
    p.set_defaults(func=cmd_configure)

    sub.add_parser("version").set_defaults(func=None)
    return parser


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _registry():
    from zentao_mcp.client import ZenTaoClient
    from zentao_mcp.mcp_server import build_registry

    return build_registry(ZenTaoClient())


def _parse_json_args(raw):
    try:
        arguments = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ArgumentError(f"[ERROR] Tool arguments must be valid JSON: {e}") from e
    if not isinstance(arguments, dict):
        raise ArgumentError("[ERROR] Tool arguments must be a JSON object.")
    return arguments


def cmd_serve(ns):
    from zentao_mcp.mcp_server import main as serve

    serve()


def cmd_tools(ns):
    specs = _registry().specs()
    if ns.search:
        needle = ns.search.lower()
        specs = [s for s in specs if needle in s.name]
    output(tool_rows(specs), format_tools_table, ns.format)


def cmd_schema(ns):
    spec = _registry().get(ns.tool)
    if spec is None:
        raise ZenTaoError(f"[ERROR] Unknown tool: {ns.tool}")
    data = {"name": spec.name, "description": spec.description, "inputSchema": spec.input_schema()}
    output(data, format_schema_table, ns.format)


def cmd_call(ns):
    arguments = _parse_json_args(ns.json_args)
    result = _registry().call(ns.tool, arguments)
    if result.is_error:
        raise ZenTaoError(result.text)
    print(format_result_text(result.text, ns.format))


def cmd_resources(ns):
    from zentao_mcp.mcp_server import _resources

    rows = [
        {"uri": r.uri, "name": r.name, "description": r.description}
        for r in _resources.RESOURCES + _resources.TEMPLATES
    ]
    output(rows, format_resources_table, ns.format)


def cmd_read(ns):
    from zentao_mcp.client import ZenTaoClient
    from zentao_mcp.mcp_server import _resources

    text = _resources.read_resource(ZenTaoClient(), ns.uri)
    print(format_result_text(text, ns.format))


def cmd_configure(ns):
    updates = {
        "ZENTAO_BASE_URL": ns.base_url,
        "ZENTAO_AUTH_METHOD": ns.auth_method,
        "ZENTAO_APP_CODE": ns.code,
        "ZENTAO_APP_KEY": ns.key,
    }
    updates = {k: v for k, v in updates.items() if v}
    if not updates:
        raise SetupError(
            "[ERROR] Nothing to configure. Pass --base-url, --auth-method, --code or --key."
        )
    for key, value in updates.items():
        config.save_env_value(key, value)
    print(f"Saved {', '.join(sorted(updates))} to {config.ENV_PATH}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _emit_error(err, fmt):
    msg = str(err)
    if fmt == "json":
        payload = {
            "ok": False,
            "error": {
                "type": type(err).__name__,
                "message": msg,
                "exit_code": getattr(err, "exit_code", 1),
            },
        }
        print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
        return
    print(msg, file=sys.stderr)


def main(argv=None):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    argv = sys.argv[1:] if argv is None else argv
    fmt = "json"
    try:
        fmt, verbose, remaining = _extract_global_flags(argv)
        if verbose:
            config.LOG_LEVEL = "debug"

        # MCP clients launch the bare executable.
        if not remaining:
            remaining = ["serve"]

        ns = build_parser().parse_args(remaining)
        ns.format = fmt

        if ns.show_help or not ns.command:
            print(HELP_TEXT)
            sys.exit(0)

        if ns.command == "version":
            print(f"zentao-mcp {config.VERSION}")
            sys.exit(0)

        ns.func(ns)

    except ZenTaoError as e:
        _emit_error(e, fmt)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
