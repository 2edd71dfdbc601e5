# config/settings.py
#
# ============================================================================
# WHAT THIS FILE DOES:
# This is the "control panel" for the gateway. Every setting that might
# change (the Apps Script endpoint, the shared API key, where downloaded
# attachments land) is defined here in one place.
#
# Two kinds of things live here:
#   1. Plain constants (server name, environment variable names, etc.)
#   2. load_gateway_config(), which reads the environment ONCE at startup
#      and returns a frozen GatewayConfig that the rest of the code receives
#      as an argument. Nothing else reads os.environ.
# ============================================================================

import os
from dataclasses import dataclass
from pathlib import Path

from gateway.errors import ConfigurationError


# ── SERVER IDENTITY ────────────────────────────────────────────────────
# What we report to MCP clients during the initialize handshake.

SERVER_NAME = "mcp-gmail"
SERVER_VERSION = "0.0.2"


# ── ENVIRONMENT VARIABLES ──────────────────────────────────────────────
# The Apps Script web app URL and the key it expects in "apiKey".
# Both are REQUIRED: the server refuses to start without them.

ENDPOINT_ENV = "GAS_ENDPOINT"
API_KEY_ENV = "VALID_API_KEY"

# Optional: where downloaded attachments are written.
DOWNLOAD_DIR_ENV = "GMAIL_DOWNLOAD_DIR"

# The user's Downloads folder. We never create it. If it's missing,
# attachment downloads fail with a filesystem error.
DEFAULT_DOWNLOADS_DIR = Path.home() / "Downloads"


# ── RESPONSE FORMATTING ────────────────────────────────────────────────
# Remote results are shown to the client verbatim, so the indentation
# must never change between calls.
JSON_INDENT = 2


@dataclass(frozen=True)
class GatewayConfig:
    """Process-wide settings, read once at startup and never mutated."""
    endpoint: str
    api_key: str
    downloads_dir: Path = DEFAULT_DOWNLOADS_DIR


def load_gateway_config(environ=None) -> GatewayConfig:
    """
    Build the GatewayConfig from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ). Tests pass
                 a plain dict here instead of touching the real environment.

    Returns:
        A frozen GatewayConfig.

    Raises:
        ConfigurationError: If the endpoint or API key is missing or blank.
    """
    if environ is None:
        environ = os.environ

    endpoint = environ.get(ENDPOINT_ENV, "").strip()
    api_key = environ.get(API_KEY_ENV, "").strip()

    missing = [
        name for name, value in ((ENDPOINT_ENV, endpoint), (API_KEY_ENV, api_key))
        if not value
    ]
    if missing:
        raise ConfigurationError(
            "GAS configuration is missing. Please set "
            + " and ".join(missing) + " in your environment or .env file."
        )

    downloads_dir = environ.get(DOWNLOAD_DIR_ENV, "").strip()
    return GatewayConfig(
        endpoint=endpoint,
        api_key=api_key,
        downloads_dir=Path(downloads_dir).expanduser() if downloads_dir else DEFAULT_DOWNLOADS_DIR,
    )
