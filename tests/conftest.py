import httpx
import pytest
from fastapi.testclient import TestClient

from caption_relay.main import app
from caption_relay.routes.dependencies import get_http_client


TRANSCRIPT_XML = b"""<?xml version="1.0" encoding="utf-8" ?>
<transcript>
<text start="1.5" dur="2.25">Guten Tag</text>
<text start="3.75" dur="1.2">zweite
Zeile</text>
</transcript>
"""

LIST_XML = b"""<?xml version="1.0" encoding="utf-8" ?>
<transcript_list docid="123">
<track id="0" name="" lang_code="en" lang_original="English" lang_translated="English"/>
<track id="1" name="" lang_code="de" lang_original="Deutsch" lang_translated="German"/>
<track id="2" name="" lang_code="fr" lang_original="Fran&#231;ais" lang_translated="French"/>
</transcript_list>
"""


class Provider:
    """Records outbound requests and answers them with a canned response."""

    def __init__(self, status_code=200, content=b"", error=None, redirect_to=None):
        self.status_code = status_code
        self.content = content
        self.error = error
        self.redirect_to = redirect_to
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.redirect_to is not None and len(self.requests) == 1:
            return httpx.Response(302, headers={"Location": self.redirect_to})
        return httpx.Response(self.status_code, content=self.content)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def provider():
    return Provider()


@pytest.fixture
def client(provider):
    async def override_http_client():
        async with provider.client() as http_client:
            yield http_client

    app.dependency_overrides[get_http_client] = override_http_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
