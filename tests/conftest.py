# tests/conftest.py
#
# Shared fixtures. The Apps Script endpoint is replaced by an
# httpx.MockTransport, so no test ever touches the network.

import json
from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.settings import GatewayConfig
from gateway.dispatcher import GmailGateway
from tools.gas_client import GasClient

ENDPOINT = "https://script.google.com/macros/s/test-deployment/exec"
API_KEY = "test-api-key"


class StubRemote:
    """
    A fake Apps Script endpoint.

    Set .status / .payload (or .body for raw bytes) before a call, then
    inspect .requests to see exactly what was sent.
    """

    def __init__(self):
        self.status = 200
        self.payload = {"ok": True}
        self.body = None
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.body is not None:
            return httpx.Response(self.status, content=self.body)
        return httpx.Response(self.status, content=json.dumps(self.payload).encode("utf-8"))

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def params(self, index: int = -1) -> dict[str, list[str]]:
        """Decoded query parameters of a recorded request."""
        return parse_qs(urlsplit(str(self.requests[index].url)).query, keep_blank_values=True)


@pytest.fixture
def stub_remote():
    return StubRemote()


@pytest.fixture
def gas_client(stub_remote):
    return GasClient(ENDPOINT, API_KEY, transport=httpx.MockTransport(stub_remote))


@pytest.fixture
def gateway_config(tmp_path):
    return GatewayConfig(endpoint=ENDPOINT, api_key=API_KEY, downloads_dir=tmp_path)


@pytest.fixture
def gateway(gateway_config, gas_client):
    return GmailGateway(gateway_config, client=gas_client)
