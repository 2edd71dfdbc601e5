# gateway/responses.py
#
# ============================================================================
# WHAT THIS FILE DOES:
# Turns what Apps Script sent back (or what went wrong) into the reply an
# MCP client sees. Every reply is exactly ONE text block:
#
#   success → the JSON result, pretty-printed
#             (or, for attachments, the path of the saved file)
#   failure → "Error: <message>" with isError=True, so the client can tell
#             failure from success without reading the text
# ============================================================================

import base64
import binascii
import json
from pathlib import Path

from mcp.types import CallToolResult, TextContent

from config.settings import JSON_INDENT
from gateway.errors import AttachmentWriteError, RemoteFormatError


# ── RESULT BUILDERS ────────────────────────────────────────────────────

def text_result(text: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=False)


def error_result(error: Exception) -> CallToolResult:
    """Wrap any exception as an error-flagged tool result."""
    message = str(error) or type(error).__name__
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )


def json_text(result) -> str:
    """
    Pretty-print a remote result.

    Keys keep the order Apps Script sent them in and non-ASCII text
    (Japanese subjects, accented names) is left readable.
    """
    return json.dumps(result, indent=JSON_INDENT, ensure_ascii=False)


# ── ATTACHMENTS ────────────────────────────────────────────────────────

def extract_attachment(result) -> tuple[str, str]:
    """
    Pull (name, base64 data) out of a downloadAttachment result.

    Expected shape: {"attachment": {"name": "report.pdf", "base64": "JVBER..."}}

    Raises:
        RemoteFormatError: If either field is missing, empty or not a string,
                           or the name has a directory component on this
                           platform ("../x", "sub/x", and "a\\b" on Windows).
    """
    attachment = result.get("attachment") if isinstance(result, dict) else None
    if not isinstance(attachment, dict):
        raise RemoteFormatError("Invalid attachment data from API: no attachment object")

    name = attachment.get("name")
    data = attachment.get("base64")
    missing = [
        field for field, value in (("name", name), ("base64", data))
        if not isinstance(value, str) or not value
    ]
    if missing:
        raise RemoteFormatError(
            "Invalid attachment data from API: missing " + ", ".join(f"attachment.{f}" for f in missing)
        )

    # The file must land directly inside the download folder.
    if name in (".", "..") or Path(name).name != name or "\x00" in name:
        raise RemoteFormatError(f"Invalid attachment data from API: unusable file name {name!r}")

    return name, data


def decode_attachment(data: str) -> bytes:
    """
    Decode an attachment payload.

    Accepts both the standard and the URL-safe base64 alphabet (Gmail uses
    the latter) and tolerates missing "=" padding.
    """
    cleaned = "".join(data.split())
    cleaned += "=" * (-len(cleaned) % 4)
    try:
        return base64.b64decode(cleaned, altchars=b"-_")
    except (binascii.Error, ValueError) as e:
        raise RemoteFormatError(f"Invalid attachment data from API: {e}") from e


def save_attachment(result, downloads_dir: Path) -> str:
    """
    Write a downloaded attachment into the download folder.

    An existing file with the same name is overwritten. The folder itself is
    never created: if it doesn't exist, that's reported as a write failure.

    Returns:
        The reply text, naming the absolute path that was written.
    """
    name, data = extract_attachment(result)
    content = decode_attachment(data)

    file_path = (Path(downloads_dir) / name).absolute()
    try:
        file_path.write_bytes(content)
    except OSError as e:
        raise AttachmentWriteError(f"Could not save attachment to {file_path}: {e}", path=file_path) from e

    return f"Attachment saved to {file_path}"
