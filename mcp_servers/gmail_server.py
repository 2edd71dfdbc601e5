# mcp_servers/gmail_server.py
#
# ============================================================================
# WHAT THIS FILE DOES:
# This is the MCP (Model Context Protocol) server that exposes our Gmail
# gateway to AI clients. It does no Gmail work itself. Every call is
# handed to GmailGateway, which forwards it to the Apps Script endpoint.
#
# HOW IT WORKS:
#   1. Client connects → asks "what tools do you have?"
#   2. Server responds with the six catalog entries and their schemas
#   3. Client says: "Call search_messages with query='is:unread'"
#   4. GmailGateway validates, calls Apps Script, and builds the reply
#
# Run via: python main.py   (which loads the config first)
# ============================================================================

# "Server" is the low-level MCP server class from the official MCP Python
# SDK. It handles the protocol details (JSON-RPC messages, etc.).
from mcp.server import Server

# "stdio_server" provides the stdio transport: the client starts this
# process and talks to it over stdin/stdout pipes.
from mcp.server.stdio import stdio_server

from mcp.types import CallToolResult, Tool
from rich.console import Console

from config.settings import SERVER_NAME, SERVER_VERSION, GatewayConfig
from gateway.dispatcher import GmailGateway

console = Console(stderr=True)


def build_server(gateway: GmailGateway) -> Server:
    """
    Create the MCP server and register the gateway's handlers on it.

    Args:
        gateway: The dispatcher that answers list_tools and call_tool

    Returns:
        A Server ready to run on any MCP transport.
    """
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    # ── TOOL LISTING ───────────────────────────────────────────────────
    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return gateway.list_tools()

    # ── TOOL EXECUTION ─────────────────────────────────────────────────
    # The SDK's own schema check is turned off: GmailGateway validates
    # the arguments and words the error messages itself.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict) -> CallToolResult:
        return await gateway.call_tool(name, arguments)

    return server


async def serve(config: GatewayConfig) -> None:
    """
    Start the MCP server on stdio and run until the client disconnects.
    """
    server = build_server(GmailGateway(config))

    async with stdio_server() as (read_stream, write_stream):
        console.print("MCP Gmail Server running on stdio with API Key auth")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
