# gateway/dispatcher.py
#
# ============================================================================
# WHAT THIS FILE DOES:
# This is the "traffic controller" between MCP clients and Apps Script.
# For every tool call it runs the same four steps:
#
#   1. Look up the operation in the catalog     (unknown name → error)
#   2. Validate the arguments                   (bad arguments → error)
#   3. Call Apps Script with the mapped action  (HTTP/JSON problems → error)
#   4. Build the reply text                     (bad attachment → error)
#
# Whatever goes wrong in any step, the client gets back ONE error-flagged
# text block. Nothing is ever raised into the MCP transport, so a single
# bad call can't take the server down.
# ============================================================================

from typing import Any

from mcp.types import CallToolResult, Tool
from rich.console import Console
from rich.markup import escape

from config.settings import GatewayConfig
from gateway.catalog import operations_by_name, tool_definitions
from gateway.errors import UnknownOperationError
from gateway.responses import error_result, text_result
from gateway.validation import remote_params, validate_arguments
from tools.gas_client import GasClient

# stdout carries the MCP protocol, so all human-readable output goes to stderr.
console = Console(stderr=True)


class GmailGateway:
    """
    Dispatches MCP tool calls to the Apps Script endpoint.

    Holds no per-call state: the config, client and catalog are fixed at
    construction, so concurrent calls can share one instance safely.
    """

    def __init__(self, config: GatewayConfig, client: GasClient | None = None, operations=None):
        self.config = config
        self.client = client or GasClient(config.endpoint, config.api_key)
        self.operations = operations_by_name(operations)

    def list_tools(self) -> list[Tool]:
        """The catalog as MCP Tool definitions, in advertised order."""
        return tool_definitions(list(self.operations.values()))

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> CallToolResult:
        """
        Run one tool call end to end.

        Args:
            name:      Which operation the client asked for
            arguments: The arguments the client provided

        Returns:
            A CallToolResult with exactly one text block; isError is set
            if any step failed.
        """
        console.print(f"[dim]tool call: {escape(str(name))}[/dim]")
        try:
            operation = self.operations.get(name)
            if operation is None:
                raise UnknownOperationError(name)

            validated = validate_arguments(operation, arguments)
            result = await self.client.call(operation.action, remote_params(validated))
            return text_result(operation.build_response(result, self.config.downloads_dir))

        except Exception as e:
            # Any failure, expected or not, becomes an error reply.
            console.print(f"[red]{escape(str(name))} failed: {escape(f'{type(e).__name__}: {e}')}[/red]")
            return error_result(e)
