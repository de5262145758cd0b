"""MCP server exposing GitHub user activity over stdio."""

import asyncio
import sys
from typing import Any, Dict, List, Optional

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from app.core.config import GITHUB_API_URL, GITHUB_TOKEN
from app.core.errors import ToolInternalError, ToolResultError
from app.core.logging import configure_logging, logger
from app.core.translations import (
    TranslationHelper,
    null_translation_helper,
    translation_helper,
)
from app.mcp.results import result_text
from app.mcp.tools import TOOLS, GetClientFn, ToolContext
from app.services.github_client import GitHubClient

INSTRUCTIONS = """
# GitHub Activity

Use **get_user_activity** to read the recent public events of a GitHub user.

- One page per call; pass `page` and `perPage` to walk further back.
- Each event carries id, type, actor, repo and created_at.
- `payload` is the raw event payload and only appears when GitHub sent one.
"""


def client_provider(client: GitHubClient) -> GetClientFn:
    """Hand out one shared client; httpx pools connections across calls."""

    async def get_client(ctx: ToolContext) -> GitHubClient:
        return client

    return get_client


def _current_request_id(server: Server) -> Optional[str]:
    try:
        return str(server.request_context.request_id)
    except LookupError:
        return None


def build_server(
    get_client: GetClientFn, t: TranslationHelper = null_translation_helper
) -> Server:
    server = Server("github-activity", instructions=INSTRUCTIONS)
    definitions = {name: factory(get_client, t) for name, factory in TOOLS.items()}

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return [definition.tool for definition in definitions.values()]

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        definition = definitions.get(name)
        if definition is None:
            raise ValueError(f"unknown tool: {name}")

        ctx = ToolContext(request_id=_current_request_id(server))
        try:
            result = await definition.handler(ctx, arguments or {})
        except ToolInternalError:
            logger.exception("Tool %s failed", name)
            raise

        for api_error in ctx.api_errors:
            logger.warning("GitHub API error in %s: %s", name, api_error)

        # The framework reports raised errors as isError results with str(exc) as text
        if result.isError:
            raise ToolResultError(result_text(result))
        return [block for block in result.content if isinstance(block, TextContent)]

    return server


async def serve(token: str = GITHUB_TOKEN, base_url: str = GITHUB_API_URL) -> None:
    client = GitHubClient(token=token, base_url=base_url)
    server = build_server(client_provider(client), translation_helper())
    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Starting github-activity MCP server (api: %s)", base_url)
            await server.run(
                read_stream, write_stream, server.create_initialization_options()
            )
    finally:
        await client.aclose()
        logger.info("github-activity MCP server stopped")


def run_server():
    """Run the MCP server with stdio transport."""
    configure_logging()
    if not GITHUB_TOKEN:
        print(
            "Error: set GITHUB_PERSONAL_ACCESS_TOKEN or GITHUB_TOKEN",
            file=sys.stderr,
        )
        sys.exit(1)
    asyncio.run(serve())


if __name__ == "__main__":
    run_server()
