# main.py
#
# ============================================================================
# WHAT THIS FILE DOES:
# This is the "start button" for the gateway. MCP clients (Claude Desktop,
# an agent framework, ...) launch it as a subprocess and talk to it over
# stdin/stdout.
#
# It does three things:
#   1. Loads settings from the .env file (if there is one)
#   2. Checks that GAS_ENDPOINT and VALID_API_KEY are set
#      (exits with status 1 and a helpful message if not)
#   3. Starts the MCP server on stdio
#
# USAGE:
#   python main.py
#   gas-gmail-mcp            → same thing, once installed with pip
# ============================================================================

import asyncio
import sys

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from config.settings import API_KEY_ENV, ENDPOINT_ENV, load_gateway_config
from gateway.errors import ConfigurationError
from mcp_servers.gmail_server import serve

# stdout belongs to the MCP protocol; messages for humans go to stderr.
console = Console(stderr=True)


def main():
    """
    Load the configuration, then serve MCP requests until the client leaves.

    Configuration problems are reported BEFORE the server starts, so a
    misconfigured gateway never accepts a connection.
    """
    # Read .env into the environment (existing variables win).
    load_dotenv()

    try:
        config = load_gateway_config()
    except ConfigurationError as e:
        console.print(f"[red]Error: {e}[/red]")
        console.print(f"   Create a .env file with: {ENDPOINT_ENV}=https://script.google.com/macros/s/.../exec")
        console.print(f"                            {API_KEY_ENV}=your-shared-key")
        sys.exit(1)

    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        console.print(f"[red]Fatal error running server: {escape(str(e))}[/red]")
        sys.exit(1)


# ── ENTRY POINT ────────────────────────────────────────────────────────

if __name__ == "__main__":
    main()
