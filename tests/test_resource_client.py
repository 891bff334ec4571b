import threading
from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest

from toshl.adapters.transport import HttpxTransport
from toshl.core.domain.errors import (
    ConfigurationError,
    MalformedLocation,
    UnexpectedStatus,
)
from toshl.core.services.resource_client import ResourceClient

from tests.conftest import BASE_URL, TOKEN


def test_create_returns_id_from_location(make_client):
    client, recorder = make_client(
        lambda request: httpx.Response(201, headers={"Location": f"{BASE_URL}/accounts/abc123"})
    )

    assert client.create("accounts", '{"name": "Cash"}') == "abc123"
    request = recorder.requests[0]
    assert request.method == "POST"
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["Authorization"] == f"Bearer {TOKEN}"


@pytest.mark.parametrize("headers", [{}, {"Location": ""}, {"Location": f"{BASE_URL}/"}])
def test_create_with_malformed_location(make_client, headers):
    client, _ = make_client(lambda request: httpx.Response(201, headers=headers))

    with pytest.raises(MalformedLocation):
        client.create("accounts", "{}")


def test_create_with_error_status(make_client):
    client, _ = make_client(lambda request: httpx.Response(400, text='{"error_id": "validation"}'))

    with pytest.raises(UnexpectedStatus) as info:
        client.create("accounts", "{}")
    assert info.value.status_code == 400


def test_replace_returns_body_verbatim(make_client):
    client, recorder = make_client(lambda request: httpx.Response(200, text='{"id": "1", "name": "New"}'))

    assert client.replace("accounts/1", '{"name": "New"}') == '{"id": "1", "name": "New"}'
    assert recorder.requests[0].method == "PUT"


def test_replace_404_is_unexpected_status(make_client):
    client, _ = make_client(lambda request: httpx.Response(404, text='{"error_id": "not_found"}'))

    with pytest.raises(UnexpectedStatus) as info:
        client.replace("accounts/1", "{}")
    assert (info.value.status_code, info.value.body) == (404, '{"error_id": "not_found"}')


def test_delete_404_is_unexpected_status(make_client):
    client, _ = make_client(lambda request: httpx.Response(404, text="gone"))

    with pytest.raises(UnexpectedStatus) as info:
        client.delete("accounts/1")
    assert (info.value.status_code, info.value.body) == (404, "gone")


def test_delete_success(make_client):
    client, recorder = make_client(lambda request: httpx.Response(204))

    assert client.delete("accounts/1") is None
    assert recorder.requests[0].method == "DELETE"
    assert "Content-Type" not in recorder.requests[0].headers


def test_get_404_returns_body(make_client):
    client, _ = make_client(lambda request: httpx.Response(404, text='{"error_id": "not_found"}'))

    assert client.fetch_one("accounts/1") == '{"error_id": "not_found"}'


def test_fetch_one_is_repeatable(make_client):
    client, recorder = make_client(lambda request: httpx.Response(200, text='{"id": "1"}'))

    assert client.fetch_one("accounts/1") == client.fetch_one("accounts/1")
    assert len(recorder.requests) == 2


def test_fetch_one_with_query(make_client):
    client, recorder = make_client(lambda request: httpx.Response(200, text="{}"))

    client.fetch_one("entries/9", "expand=true")
    assert str(recorder.requests[0].url) == f"{BASE_URL}/entries/9?expand=true"


def test_submit_does_not_need_location(make_client):
    client, _ = make_client(lambda request: httpx.Response(204))

    assert client.submit("accounts/reorder", '{"order": []}') == ""


def test_from_token_with_injected_transport():
    http = httpx.Client(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, text=request.headers["User-Agent"]))
    )
    client = ResourceClient.from_token(TOKEN, transport=HttpxTransport(http), user_agent="tests/1.0")

    assert client.fetch_one("me") == "tests/1.0"
    assert client.settings.base_url == "https://api.toshl.com"
    http.close()


def test_missing_token_is_configuration_error():
    with pytest.raises(ConfigurationError):
        ResourceClient()


def test_bad_base_url_is_configuration_error():
    with pytest.raises(ConfigurationError):
        ResourceClient.from_token(TOKEN, base_url="notaurl://")


def test_owned_client_is_closed(monkeypatch):
    monkeypatch.setenv("TOSHL_TOKEN", TOKEN)

    with ResourceClient() as client:
        http = client.transport.client
        assert not http.is_closed
    assert http.is_closed


def test_injected_transport_is_not_closed():
    http = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    with ResourceClient.from_token(TOKEN, transport=HttpxTransport(http)):
        pass
    assert not http.is_closed
    http.close()


def test_fetch_one_from_two_threads(make_client):
    barrier = threading.Barrier(2)

    def handler(request):
        barrier.wait(timeout=5)
        return httpx.Response(200, text=request.url.path)

    client, recorder = make_client(handler)

    with ThreadPoolExecutor(max_workers=2) as pool:
        first = pool.submit(client.fetch_one, "accounts/1")
        second = pool.submit(client.fetch_one, "accounts/2")
        results = (first.result(timeout=10), second.result(timeout=10))

    assert results == ("/accounts/1", "/accounts/2")
    assert len(recorder.requests) == 2
