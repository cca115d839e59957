import json

import httpx
import pytest

from axme import AxmeClient


class RecordingServer:
    """Answers every request with a canned response and keeps what it received."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = b""

    def reply(self, status_code=200, *, json_body=None, text=None):
        self.status_code = status_code
        if json_body is not None:
            self.body = json.dumps(json_body).encode()
        elif text is not None:
            self.body = text.encode()
        else:
            self.body = b""

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def server():
    return RecordingServer()


@pytest.fixture
def http_client(server):
    client = httpx.Client(transport=httpx.MockTransport(server))
    yield client
    client.close()


@pytest.fixture
def client(http_client):
    return AxmeClient(base_url="https://api.axme.test", api_key="token", http_client=http_client)
