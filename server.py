# server.py
import sys
import asyncio
import logging
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from config import ConfigError, Settings
from dispatcher import FR24Client, ToolResult
from tool_registry import TOOLS
from validation import Rejected, validate_flight_eta, validate_flight_positions

SERVER_NAME = "flightradar24-server"
SERVER_VERSION = "1.0.0"

logger = logging.getLogger("fr24.mcp.server")


def _fault(code: int, message: str) -> McpError:
    return McpError(types.ErrorData(code=code, message=message))


def list_tool_definitions() -> List[types.Tool]:
    """Build the MCP tool catalog from the registry."""
    return [
        types.Tool(name=name, description=meta["desc"], inputSchema=meta["schema"])
        for name, meta in TOOLS.items()
    ]


async def call_tool(fr24: FR24Client, name: str, arguments: Optional[Dict[str, Any]]) -> ToolResult:
    """
    Validate a tool call and dispatch it upstream.

    Unknown tools and rejected arguments raise McpError before any request
    is made. Upstream failures come back as an error ToolResult.
    """
    logger.info("call_tool: name=%s arguments=%s", name, arguments)

    if name == "get_flight_positions":
        params = validate_flight_positions(arguments)
        if isinstance(params, Rejected):
            raise _fault(types.INVALID_PARAMS, params.message)
        return await fr24.get_flight_positions(params)

    if name == "get_flight_eta":
        flight_number = validate_flight_eta(arguments)
        if isinstance(flight_number, Rejected):
            raise _fault(types.INVALID_PARAMS, flight_number.message)
        return await fr24.get_flight_eta(flight_number)

    raise _fault(types.METHOD_NOT_FOUND, f"Unknown tool: {name}")


def create_server(fr24: FR24Client) -> Server:
    """Wire the tool catalog and call handler onto a low-level MCP server."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return list_tool_definitions()

    # Registered directly so McpError reaches the JSON-RPC error channel
    # instead of being folded into an isError result.
    async def handle_call_tool(request: types.CallToolRequest) -> types.ServerResult:
        name = request.params.name
        try:
            result = await call_tool(fr24, name, request.params.arguments)
        except McpError as err:
            logger.warning("[MCP Error] %s: %s", name, err.error.message)
            raise
        except Exception:
            logger.exception("[MCP Error] tool %s failed", name)
            raise

        return types.ServerResult(
            types.CallToolResult(
                content=[types.TextContent(type="text", text=result.text)],
                isError=result.is_error,
            )
        )

    server.request_handlers[types.CallToolRequest] = handle_call_tool
    return server


async def serve(settings: Settings) -> None:
    """Serve the tools over stdio until the transport closes."""
    async with FR24Client(settings) as fr24:
        server = create_server(fr24)
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Flightradar24 MCP server running on stdio (upstream=%s)", settings.base_url)
            await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    # stdout carries the stdio transport, so logs go to stderr
    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        logging.basicConfig(level="INFO", stream=sys.stderr)
        logger.error("Invalid configuration: %s", exc)
        sys.exit(1)

    logging.basicConfig(level=settings.log_level, stream=sys.stderr)
    logger.info("Starting %s %s", SERVER_NAME, SERVER_VERSION)

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, transport closed")
    sys.exit(0)


# --- Run MCP Server ---
if __name__ == "__main__":
    main()
