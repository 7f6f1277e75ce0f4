from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from dcsync.client import DynamicContentClient, Page, paginate
from dcsync.config import Settings
from dcsync.errors import DcsyncError, HubApiError, HubResponseError
from dcsync.schemas.models import ContentTypeSchema, ValidationLevel


class FakeResponse:
    def __init__(self, status_code: int, data: Any = None, text: str = "") -> None:
        self.status_code = status_code
        self._data = data
        self.text = text

    def json(self) -> Any:
        return self._data


class FakeSession:
    """Records requests and answers them from a queue of responses."""

    def __init__(self, responses: List[FakeResponse]) -> None:
        self.responses = responses
        self.posts: List[Dict[str, Any]] = []
        self.requests: List[Dict[str, Any]] = []

    def post(self, url: str, data: Dict[str, Any], timeout: float) -> FakeResponse:
        self.posts.append({"url": url, "data": data})
        return FakeResponse(200, {"access_token": "token-1"})

    def request(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        timeout: float = 30,
    ) -> FakeResponse:
        self.requests.append(
            {"method": method, "url": url, "headers": headers, "params": params, "json": json}
        )
        return self.responses.pop(0)


SETTINGS = Settings(
    client_id="id",
    client_secret="secret",
    hub_id="hub-1",
    api_url="https://api.example.com/v2/content",
    auth_url="https://auth.example.com/oauth/token",
)


def schema_json(id: str, schema_id: str) -> Dict[str, Any]:
    return {"id": id, "schemaId": schema_id, "body": "{}", "validationLevel": "CONTENT_TYPE"}


def test_requests_carry_bearer_token_fetched_once() -> None:
    session = FakeSession(
        [
            FakeResponse(200, {"id": "hub-1", "name": "main"}),
            FakeResponse(200, schema_json("a", "page")),
        ]
    )
    client = DynamicContentClient(SETTINGS, session=session)  # type: ignore[arg-type]

    hub = client.hubs.get("hub-1")
    schema = client.content_type_schemas.get("a")

    assert hub.id == "hub-1" and hub.name == "main"
    assert schema.schema_id == "page"
    assert len(session.posts) == 1
    assert session.posts[0]["data"]["grant_type"] == "client_credentials"
    assert [r["url"] for r in session.requests] == [
        "https://api.example.com/v2/content/hubs/hub-1",
        "https://api.example.com/v2/content/content-type-schemas/a",
    ]
    assert all(r["headers"]["Authorization"] == "Bearer token-1" for r in session.requests)


def test_error_status_raises_hub_api_error() -> None:
    session = FakeSession([FakeResponse(404, text="Not Found")])
    client = DynamicContentClient(SETTINGS, session=session)  # type: ignore[arg-type]

    with pytest.raises(HubApiError) as excinfo:
        client.content_type_schemas.get("missing")

    assert excinfo.value.status_code == 404
    assert "/content-type-schemas/missing" in str(excinfo.value)


def test_list_and_create_on_hub() -> None:
    session = FakeSession(
        [
            FakeResponse(200, {"id": "hub-1"}),
            FakeResponse(
                200,
                {
                    "_embedded": {"content-type-schemas": [schema_json("a", "page")]},
                    "page": {"number": 0, "totalPages": 1, "size": 100},
                },
            ),
            FakeResponse(201, schema_json("b", "article")),
        ]
    )
    client = DynamicContentClient(SETTINGS, session=session)  # type: ignore[arg-type]
    hub = client.hubs.get("hub-1")

    page = hub.list_content_type_schemas(page=0, size=100)
    created = hub.create_content_type_schema(
        ContentTypeSchema(body="{}", validation_level=ValidationLevel.CONTENT_TYPE)
    )

    assert [s.id for s in page.items] == ["a"]
    assert page.is_last
    assert session.requests[1]["params"] == {"page": 0, "size": 100}
    assert session.requests[2]["method"] == "POST"
    assert session.requests[2]["json"] == {"body": "{}", "validationLevel": "CONTENT_TYPE"}
    assert created.id == "b"


def test_update_patches_body_and_validation_level() -> None:
    session = FakeSession([FakeResponse(200, schema_json("a", "page"))])
    client = DynamicContentClient(SETTINGS, session=session)  # type: ignore[arg-type]

    client.content_type_schemas.update(
        ContentTypeSchema(
            id="a",
            schema_id="page",
            body='{"x": 1}',
            validation_level=ValidationLevel.PARTIAL,
            version=4,
        )
    )

    request = session.requests[0]
    assert request["method"] == "PATCH"
    assert request["url"].endswith("/content-type-schemas/a")
    assert request["json"] == {"body": '{"x": 1}', "validationLevel": "PARTIAL", "version": 4}


def test_empty_list_response_is_a_single_empty_page() -> None:
    page = Page.from_response({}, "content-type-schemas")

    assert page.items == []
    assert page.is_last


def test_paginate_follows_pages() -> None:
    pages = {
        0: Page(items=[ContentTypeSchema(id="a")], number=0, total_pages=3),
        1: Page(items=[ContentTypeSchema(id="b")], number=1, total_pages=3),
        2: Page(items=[ContentTypeSchema(id="c")], number=2, total_pages=3),
    }
    requested: List[int] = []

    def list_fn(page: int = 0, size: int = 100) -> Page:
        requested.append(page)
        return pages[page]

    items = paginate(list_fn, size=1)

    assert [s.id for s in items] == ["a", "b", "c"]
    assert requested == [0, 1, 2]


def test_unknown_validation_level_from_hub_is_reported() -> None:
    session = FakeSession(
        [
            FakeResponse(200, {"id": "hub-1"}),
            FakeResponse(
                200,
                {
                    "_embedded": {
                        "content-type-schemas": [
                            {"id": "a", "schemaId": "page", "validationLevel": "HIERARCHY"}
                        ]
                    },
                    "page": {"number": 0, "totalPages": 1},
                },
            ),
        ]
    )
    client = DynamicContentClient(SETTINGS, session=session)  # type: ignore[arg-type]
    hub = client.hubs.get("hub-1")

    with pytest.raises(HubResponseError) as excinfo:
        paginate(hub.list_content_type_schemas)

    assert "/hubs/hub-1/content-type-schemas" in str(excinfo.value)
    assert "HIERARCHY" in str(excinfo.value)
    assert isinstance(excinfo.value, DcsyncError)
