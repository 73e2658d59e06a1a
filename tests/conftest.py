"""
Shared fixtures for the JSON:API client tests.

RecordingTransport stands in for the network so orchestration can be
checked request by request. The ``jsonapi_app`` fixture is an in-process
FastAPI server reached through ``httpx.ASGITransport`` for tests that go
through the real HttpxTransport.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from httpx_jsonapi import JSONAPIClient
from httpx_jsonapi.transport import Transport, TransportResponse
from httpx_jsonapi.utils.content_negotiation import JSONAPI_MEDIA_TYPE

BASE_URL = "https://api.example.com/edge"


class RecordingTransport(Transport):
    """Record every request and reply with queued bodies.

    With ``echo=True`` the request document is returned as the response.
    With ``error`` set every request raises it.
    """

    def __init__(
        self,
        responses: list[Any] | None = None,
        *,
        echo: bool = False,
        error: BaseException | None = None,
    ) -> None:
        self.responses = list(responses or [])
        self.echo = echo
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    async def perform(self, *, url, method, headers, data=None) -> TransportResponse:
        self.calls.append({"url": url, "method": method, "headers": dict(headers), "data": data})
        if self.error is not None:
            raise self.error
        if self.echo:
            return TransportResponse(status_code=200, data=data)
        body = self.responses.pop(0) if self.responses else {"data": []}
        return TransportResponse(status_code=200, data=body)

    async def aclose(self) -> None:
        self.closed = True

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def client(transport):
    return JSONAPIClient(base_url=BASE_URL, transport=transport)


# ---------------------------------------------------------------------------
# In-process JSON:API server
# ---------------------------------------------------------------------------

ANIME_PAGES = [
    {"id": "1", "type": "anime", "attributes": {"canonicalTitle": "Cowboy Bebop"}},
    {"id": "2", "type": "anime", "attributes": {"canonicalTitle": "Trigun"}},
    {"id": "3", "type": "anime", "attributes": {"canonicalTitle": "Monster"}},
]


def _jsonapi(content: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content, status_code=status_code, media_type=JSONAPI_MEDIA_TYPE)


def create_app() -> FastAPI:
    app = FastAPI()
    app.state.requests = []

    @app.middleware("http")
    async def record_requests(request: Request, call_next):
        body = await request.body()
        app.state.requests.append(
            {
                "method": request.method,
                "path": request.url.path,
                "query": dict(request.query_params),
                "headers": dict(request.headers),
                "data": json.loads(body) if body else None,
            }
        )
        return await call_next(request)

    @app.get("/anime")
    async def list_anime(request: Request) -> JSONResponse:
        offset = int(request.query_params.get("page[offset]", 0))
        limit = int(request.query_params.get("page[limit]", 1))
        links = {}
        if offset + limit < len(ANIME_PAGES):
            links["next"] = (
                f"http://testserver/anime?page%5Blimit%5D={limit}&page%5Boffset%5D={offset + limit}"
            )
        return _jsonapi({"data": ANIME_PAGES[offset : offset + limit], "links": links})

    @app.get("/users")
    async def list_users(request: Request) -> JSONResponse:
        if request.query_params.get("filter[self]") == "true":
            users = [{"id": "7", "type": "users", "attributes": {"name": "wopian"}}]
        else:
            users = []
        return _jsonapi({"data": users})

    @app.get("/users/{user_id}/library-entries")
    async def user_library(user_id: str) -> JSONResponse:
        return _jsonapi(
            {
                "data": [
                    {
                        "id": "10",
                        "type": "library-entries",
                        "attributes": {"status": "current"},
                        "relationships": {"anime": {"data": {"id": "1", "type": "anime"}}},
                    }
                ],
                "included": [ANIME_PAGES[0]],
            }
        )

    @app.post("/library-entries")
    async def create_entry(request: Request) -> JSONResponse:
        document = await request.json()
        document["data"]["id"] = "42"
        return _jsonapi(document, status_code=201)

    @app.patch("/library-entries/{entry_id}")
    async def update_entry(request: Request, entry_id: str) -> JSONResponse:
        return _jsonapi(await request.json())

    @app.delete("/library-entries/{entry_id}")
    async def delete_entry(entry_id: str) -> Response:
        return Response(status_code=204)

    @app.get("/locked")
    async def locked() -> JSONResponse:
        return _jsonapi(
            {"errors": [{"status": "403", "title": "Forbidden", "detail": "Not allowed"}]},
            status_code=403,
        )

    @app.get("/plain")
    async def plain() -> PlainTextResponse:
        return PlainTextResponse("not json")

    return app


@pytest.fixture
def jsonapi_app() -> FastAPI:
    return create_app()


@pytest.fixture
def http_client(jsonapi_app):
    return JSONAPIClient(
        base_url="http://testserver",
        transport_options={"transport": httpx.ASGITransport(app=jsonapi_app)},
    )
