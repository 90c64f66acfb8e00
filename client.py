# client.py
import os
import sys
import json
import logging
import asyncio
from typing import Any, List, Optional

from dotenv import load_dotenv
from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client
from mcp.shared.exceptions import McpError

# Load environment variables
load_dotenv()

SERVER_SCRIPT = os.getenv(
    "FR24_MCP_SERVER", os.path.join(os.path.dirname(os.path.abspath(__file__)), "server.py")
)

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger("fr24.mcp.client")

# Sample calls sent after listing the tools
SAMPLE_CALLS = [
    ("get_flight_positions", {"airports": "KJFK,KLAX", "limit": "5"}),
    ("get_flight_eta", {"flightNumber": "UA123"}),
]


def _parse_content(content: list) -> Any:
    items = []
    for item in content:
        if hasattr(item, "text"):
            try:
                items.append(json.loads(item.text))
            except json.JSONDecodeError:
                items.append(item.text)
    if len(items) == 1:
        return items[0]
    return {"results": items}


class FlightMCPClient:
    def __init__(self, server_script: Optional[str] = None):
        self.server_script = server_script or SERVER_SCRIPT
        self.session: Optional[ClientSession] = None
        self._client_context = None

    async def connect(self):
        """Spawn the MCP server and open a session over stdio."""
        try:
            logger.info("Starting MCP server: %s", self.server_script)
            params = StdioServerParameters(
                command=sys.executable, args=[self.server_script], env=dict(os.environ)
            )
            self._client_context = stdio_client(params)
            read_stream, write_stream = await self._client_context.__aenter__()

            self.session = ClientSession(read_stream, write_stream)
            await self.session.__aenter__()
            await self.session.initialize()
            logger.info("Connected to MCP server")
        except Exception as e:
            logger.error("Failed to connect to MCP server: %s", e)
            raise

    async def disconnect(self):
        """Close the session and stop the server process."""
        try:
            if self.session:
                await self.session.__aexit__(None, None, None)
            if self._client_context:
                await self._client_context.__aexit__(None, None, None)
            logger.info("Disconnected from MCP server")
        except Exception as e:
            logger.error("Error during disconnect: %s", e)
        finally:
            self.session = None
            self._client_context = None

    async def list_tools(self) -> dict:
        """List available tools from the MCP server."""
        if not self.session:
            await self.connect()

        tools_list = await self.session.list_tools()
        return {
            "tools": {
                tool.name: {"description": tool.description, "inputSchema": tool.inputSchema}
                for tool in tools_list.tools
            }
        }

    async def invoke_tool(self, tool_name: str, args: dict) -> Any:
        """
        Call a tool and return its parsed text content.

        Error results become {"error": text}; protocol faults become
        {"error": message, "code": code}.
        """
        if not self.session:
            await self.connect()

        logger.info("Calling tool: %s with args: %s", tool_name, args)
        try:
            result = await self.session.call_tool(tool_name, args)
        except McpError as e:
            logger.warning("Tool %s rejected: %s", tool_name, e.error.message)
            return {"error": e.error.message, "code": e.error.code}

        if not result.content:
            return {"error": "No content in response"}
        if result.isError:
            return {"error": " ".join(getattr(item, "text", "") for item in result.content)}
        return _parse_content(result.content)

    async def run_samples(self) -> List[dict]:
        """List the tools, then send each of SAMPLE_CALLS."""
        outputs = [await self.list_tools()]
        for name, args in SAMPLE_CALLS:
            outputs.append({name: await self.invoke_tool(name, args)})
        return outputs


async def _main() -> None:
    client = FlightMCPClient()
    await client.connect()
    try:
        for output in await client.run_samples():
            print(json.dumps(output, indent=2))
    finally:
        await client.disconnect()


if __name__ == "__main__":
    asyncio.run(_main())
