import os

import httpx
import pytest

from toshl.adapters.transport import HttpxTransport
from toshl.core.config import ClientSettings
from toshl.core.services.resource_client import ResourceClient

BASE_URL = "https://api.example.com"
TOKEN = "secret-token"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.upper().startswith("TOSHL_"):
            monkeypatch.delenv(key, raising=False)
    # ClientSettings lee `.env` del cwd
    monkeypatch.chdir(tmp_path)


class Recorder:
    """Handler de MockTransport que guarda cada request recibida."""

    def __init__(self, handler):
        self.handler = handler
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def make_client():
    opened = []

    def _make(handler, **overrides):
        recorder = Recorder(handler)
        settings = ClientSettings(token=TOKEN, base_url=BASE_URL, **overrides)
        http = httpx.Client(transport=httpx.MockTransport(recorder))
        opened.append(http)
        client = ResourceClient(settings, transport=HttpxTransport(http))
        return client, recorder

    yield _make

    for http in opened:
        http.close()
