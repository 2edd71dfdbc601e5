# tools/gas_client.py
#
# ============================================================================
# WHAT THIS FILE DOES:
# This is the "remote caller." It knows how to talk to the Google Apps
# Script web app that does the real Gmail work (searching, reading,
# labelling, fetching attachments).
#
# Every request is a single HTTP GET:
#
#   <GAS_ENDPOINT>?action=search&apiKey=<key>&query=subject%3AMeeting
#
# The Apps Script decides what to do from the "action" parameter and
# answers with JSON. We don't look inside that JSON: whatever comes back
# is handed to the caller as-is.
#
# IMPORTANT: This file has NO MCP code in it. It's pure "plumbing",
# getting data from the Apps Script to the gateway.
# ============================================================================

from typing import Any

# "httpx" is an HTTP client with native async support. The MCP server runs
# on asyncio, so waiting for Apps Script must not block other tool calls.
import httpx

from gateway.errors import RemoteFormatError, RemoteTransportError


def _reject_constant(token: str):
    # json.loads accepts NaN and Infinity; strict JSON does not.
    raise ValueError(f"non-standard JSON constant {token}")


class GasClient:
    """
    Calls one Apps Script web app endpoint, authenticated with a shared key.

    A new AsyncClient is opened for every call: there are no retries, no
    connection reuse guarantees and no state kept between calls.
    """

    def __init__(self, endpoint: str, api_key: str, transport: httpx.AsyncBaseTransport | None = None):
        self.endpoint = endpoint
        self.api_key = api_key
        # Tests swap in httpx.MockTransport here instead of the network.
        self._transport = transport

    def build_url(self, action: str, params: dict[str, str]) -> httpx.URL:
        """
        Build the request URL for an action.

        Each parameter REPLACES any parameter of the same name already in
        the endpoint URL, and later ones replace earlier ones.
        httpx takes care of URL-encoding the values.
        """
        url = httpx.URL(self.endpoint)
        url = url.copy_set_param("action", action)
        url = url.copy_set_param("apiKey", self.api_key)
        for key, value in params.items():
            url = url.copy_set_param(key, value)
        return url

    async def call(self, action: str, params: dict[str, str]) -> Any:
        """
        Run one action on the Apps Script and return its parsed JSON.

        Args:
            action: Remote action name (e.g., "search", "getMessage")
            params: Action-specific query parameters

        Returns:
            Whatever JSON value the Apps Script sent back.

        Raises:
            RemoteTransportError: Network failure or a non-2xx status.
            RemoteFormatError:    The body wasn't valid JSON.
        """
        url = self.build_url(action, params)

        # Apps Script web apps answer with a 302 to googleusercontent.com,
        # so redirects have to be followed to reach the actual JSON.
        async with httpx.AsyncClient(transport=self._transport, follow_redirects=True) as client:
            try:
                response = await client.get(url)
            except httpx.HTTPError as e:
                raise RemoteTransportError(f"Request to Apps Script failed: {e}") from e

        if not response.is_success:
            raise RemoteTransportError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json(parse_constant=_reject_constant)
        except ValueError as e:
            raise RemoteFormatError(f"Apps Script returned invalid JSON: {e}") from e
