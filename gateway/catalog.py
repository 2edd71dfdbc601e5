# gateway/catalog.py
#
# ============================================================================
# WHAT THIS FILE DOES:
# This is the "menu" of the gateway: the fixed list of operations MCP
# clients can call. Each entry bundles everything needed to run it:
#
#   name            → what the client calls ("search_messages")
#   description     → what the AI reads to decide when to use it
#   arguments       → a pydantic model describing the accepted arguments
#   action          → the Apps Script "action" parameter it maps to
#   build_response  → turns the Apps Script JSON into the reply text
#
# Adding an operation means adding one entry to OPERATIONS. There's no
# if/elif chain to edit anywhere else.
# ============================================================================

from dataclasses import dataclass
from typing import Any, Callable

from mcp.types import Tool
from pydantic import BaseModel, Field, StrictStr

from gateway.responses import json_text, save_attachment


# ── ARGUMENT SHAPES ────────────────────────────────────────────────────
# Field names are sent to Apps Script unchanged as query parameters,
# which is why they're camelCase.

class SearchMessagesArguments(BaseModel):
    query: StrictStr = Field(
        min_length=1,
        description='Gmail search query, e.g. "subject:Meeting newer_than:1d"',
    )


class MessageArguments(BaseModel):
    messageId: StrictStr = Field(min_length=1, description="Gmail message ID")


class MoveToLabelArguments(BaseModel):
    messageId: StrictStr = Field(min_length=1, description="Gmail message ID")
    labelName: StrictStr = Field(min_length=1, description="Name of the destination label")


class DownloadAttachmentArguments(BaseModel):
    messageId: StrictStr = Field(min_length=1, description="Gmail message ID")
    attachmentId: StrictStr = Field(min_length=1, description="Attachment ID within the message")


@dataclass(frozen=True)
class Operation:
    """One entry of the catalog."""
    name: str
    description: str
    arguments: type[BaseModel]
    action: str
    build_response: Callable[[Any, Any], str]

    def input_schema(self) -> dict:
        return self.arguments.model_json_schema()

    def to_tool(self) -> Tool:
        return Tool(name=self.name, description=self.description, inputSchema=self.input_schema())


def _json_response(result, downloads_dir) -> str:
    return json_text(result)


# ── THE CATALOG ────────────────────────────────────────────────────────
# Order matters: tools are advertised to clients in this order.

OPERATIONS: tuple[Operation, ...] = (
    Operation(
        name="search_messages",
        description=(
            "Search Gmail for messages matching a query.\n"
            "The query uses Gmail search syntax, e.g. \"subject:Meeting newer_than:1d\".\n"
            "Returns JSON with the matching messages (subject, messageId, ...)."
        ),
        arguments=SearchMessagesArguments,
        action="search",
        build_response=_json_response,
    ),
    Operation(
        name="get_message",
        description=(
            "Get the body and details of the message with the given messageId.\n"
            "Arguments: messageId (Gmail message ID)"
        ),
        arguments=MessageArguments,
        action="getMessage",
        build_response=_json_response,
    ),
    Operation(
        name="mark_read",
        description="Mark the message with the given messageId as read.\nArguments: messageId",
        arguments=MessageArguments,
        action="markRead",
        build_response=_json_response,
    ),
    Operation(
        name="mark_unread",
        description="Mark the message with the given messageId as unread.\nArguments: messageId",
        arguments=MessageArguments,
        action="markUnread",
        build_response=_json_response,
    ),
    Operation(
        name="move_to_label",
        description=(
            "Move the message with the given messageId to a label.\n"
            "Arguments: messageId, labelName"
        ),
        arguments=MoveToLabelArguments,
        action="moveToLabel",
        build_response=_json_response,
    ),
    Operation(
        name="download_attachment",
        description=(
            "Download an attachment by messageId and attachmentId and save it to the "
            "local Downloads folder. Returns the path of the saved file.\n"
            "Arguments: messageId, attachmentId"
        ),
        arguments=DownloadAttachmentArguments,
        action="downloadAttachment",
        build_response=save_attachment,
    ),
)


def list_operations() -> tuple[Operation, ...]:
    """Return the catalog, in advertised order."""
    return OPERATIONS


def operations_by_name(operations=None) -> dict[str, Operation]:
    """Index the catalog by operation name for dispatch."""
    return {op.name: op for op in (operations if operations is not None else OPERATIONS)}


def tool_definitions(operations=None) -> list[Tool]:
    """Turn the catalog into MCP Tool objects for a list_tools reply."""
    return [op.to_tool() for op in (operations if operations is not None else OPERATIONS)]
