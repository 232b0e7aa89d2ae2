"""Low-level MCP server: exposes the registry, resources and prompts over stdio."""

from __future__ import annotations

import asyncio

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server

from zentao_mcp import config
from zentao_mcp.api import _log_event
from zentao_mcp.client import ZenTaoClient
from zentao_mcp.exceptions import ZenTaoError
from zentao_mcp.mcp_server import _prompts, _resources, build_registry

INSTRUCTIONS = (
    "ZenTao project management tools. "
    "Authenticate first with zentao_login (app code + key) or "
    "zentao_login_session (account + password), depending on the server's auth method. "
    "Tool results are the raw ZenTao JSON response; failures start with 'Failed to'."
)


def create_client() -> ZenTaoClient:
    """Build the shared client from ZENTAO_* settings."""
    return ZenTaoClient(
        base_url=config.BASE_URL,
        code=config.APP_CODE,
        key=config.APP_KEY,
        auth_method=config.AUTH_METHOD,
    )


def build_server(registry) -> Server:
    server = Server(config.SERVER_NAME, version=config.VERSION, instructions=INSTRUCTIONS)

    # --- tools ---

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(name=s.name, description=s.description, inputSchema=s.input_schema())
            for s in registry.specs()
        ]

    # Argument checking belongs to the tool engine so every caller gets
    # the same "Invalid arguments for <tool>" text.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict | None) -> list[types.TextContent]:
        result = await asyncio.to_thread(registry.call, name, arguments or {})
        if result.is_error:
            # The server turns handler exceptions into an isError result.
            raise ZenTaoError(result.text)
        return [types.TextContent(type="text", text=result.text)]

    # --- resources ---

    @server.list_resources()
    async def list_resources() -> list[types.Resource]:
        return [
            types.Resource(
                uri=r.uri, name=r.name, description=r.description, mimeType=_resources.MIME_TYPE
            )
            for r in _resources.RESOURCES
        ]

    @server.list_resource_templates()
    async def list_resource_templates() -> list[types.ResourceTemplate]:
        return [
            types.ResourceTemplate(
                uriTemplate=t.uri,
                name=t.name,
                description=t.description,
                mimeType=_resources.MIME_TYPE,
            )
            for t in _resources.TEMPLATES
        ]

    @server.read_resource()
    async def read_resource(uri) -> list[ReadResourceContents]:
        text = await asyncio.to_thread(_resources.read_resource, registry.client, str(uri))
        return [ReadResourceContents(content=text, mime_type=_resources.MIME_TYPE)]

    # --- prompts ---

    @server.list_prompts()
    async def list_prompts() -> list[types.Prompt]:
        return [
            types.Prompt(
                name=p.name,
                description=p.description,
                arguments=[
                    types.PromptArgument(name=arg, description=desc, required=True)
                    for arg, desc in p.arguments
                ],
            )
            for p in _prompts.PROMPTS
        ]

    @server.get_prompt()
    async def get_prompt(name: str, arguments: dict[str, str] | None) -> types.GetPromptResult:
        title, text = _prompts.render_prompt(name, arguments)
        return types.GetPromptResult(
            description=title,
            messages=[
                types.PromptMessage(role="user", content=types.TextContent(type="text", text=text))
            ],
        )

    return server


async def main():
    client = create_client()
    registry = build_registry(client)
    server = build_server(registry)
    _log_event(
        "info",
        "server",
        "Starting ZenTao MCP server",
        base_url=config.BASE_URL,
        auth_method=client.auth_method,
        tools=len(registry),
        version=config.VERSION,
    )
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        _log_event("info", "server", "Server stopped")
