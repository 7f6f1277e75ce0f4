"""REST client for the Dynamic Content management API.

Only the endpoints needed to synchronize content type schemas are covered:
hubs, and the content type schemas that belong to them. Responses are HAL
documents; collections embed their items under `_embedded`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from ..config import Settings
from ..errors import HubApiError, HubResponseError
from ..schemas.models import ContentTypeSchema

logger = logging.getLogger(__name__)

USER_AGENT = "dcsync"


def _parse_schema(data: Dict[str, Any], path: str) -> ContentTypeSchema:
    try:
        return ContentTypeSchema.from_dict(data)
    except ValueError as e:
        raise HubResponseError(path, str(e)) from e


@dataclass
class Page:
    items: List[ContentTypeSchema]
    number: int
    total_pages: int

    @property
    def is_last(self) -> bool:
        return self.number + 1 >= self.total_pages

    @classmethod
    def from_response(
        cls, data: Dict[str, Any], embedded_key: str, path: str = ""
    ) -> "Page":
        embedded = data.get("_embedded") or {}
        items = [_parse_schema(d, path) for d in embedded.get(embedded_key, [])]
        page = data.get("page") or {}
        return cls(
            items=items,
            number=int(page.get("number", 0)),
            total_pages=int(page.get("totalPages", 1)),
        )


class DynamicContentClient:
    """Authenticated session against the management API."""

    def __init__(
        self, settings: Settings, session: Optional[requests.Session] = None
    ) -> None:
        self.settings = settings
        self.session = session or requests.Session()
        self._token: Optional[str] = None
        self.hubs = Hubs(self)
        self.content_type_schemas = ContentTypeSchemas(self)

    def _fetch_token(self) -> str:
        resp = self.session.post(
            self.settings.auth_url,
            data={
                "grant_type": "client_credentials",
                "client_id": self.settings.client_id,
                "client_secret": self.settings.client_secret,
            },
            timeout=self.settings.timeout,
        )
        if resp.status_code >= 300:
            raise HubApiError(resp.status_code, self.settings.auth_url, resp.text[:200])
        token = resp.json().get("access_token")
        if not isinstance(token, str):
            raise HubApiError(resp.status_code, self.settings.auth_url, "no access_token")
        return token

    def _headers(self) -> Dict[str, str]:
        if self._token is None:
            self._token = self._fetch_token()
        return {
            "Accept": "application/hal+json",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
            "Authorization": f"Bearer {self._token}",
        }

    def request_json(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = f"{self.settings.api_url.rstrip('/')}{path}"
        logger.debug(f"{method} {url}")
        resp = self.session.request(
            method,
            url,
            headers=self._headers(),
            params=params,
            json=json,
            timeout=self.settings.timeout,
        )
        if resp.status_code >= 300:
            raise HubApiError(resp.status_code, path, resp.text[:200])
        return resp.json()


@dataclass
class Hub:
    id: str
    name: Optional[str]
    client: DynamicContentClient

    def list_content_type_schemas(self, page: int = 0, size: int = 100) -> Page:
        path = f"/hubs/{self.id}/content-type-schemas"
        data = self.client.request_json(
            "GET", path, params={"page": page, "size": size}
        )
        return Page.from_response(data, "content-type-schemas", path)

    def create_content_type_schema(
        self, schema: ContentTypeSchema
    ) -> ContentTypeSchema:
        path = f"/hubs/{self.id}/content-type-schemas"
        data = self.client.request_json("POST", path, json=schema.to_dict())
        return _parse_schema(data, path)


class Hubs:
    def __init__(self, client: DynamicContentClient) -> None:
        self._client = client

    def get(self, hub_id: str) -> Hub:
        data = self._client.request_json("GET", f"/hubs/{hub_id}")
        return Hub(id=data.get("id", hub_id), name=data.get("name"), client=self._client)


class ContentTypeSchemas:
    def __init__(self, client: DynamicContentClient) -> None:
        self._client = client

    def get(self, id: str) -> ContentTypeSchema:
        path = f"/content-type-schemas/{id}"
        data = self._client.request_json("GET", path)
        return _parse_schema(data, path)

    def update(self, schema: ContentTypeSchema) -> ContentTypeSchema:
        if not schema.id:
            raise ValueError("Cannot update a content type schema without an id")
        payload = {
            "body": schema.body,
            "validationLevel": schema.validation_level.value
            if schema.validation_level
            else None,
            "version": schema.version,
        }
        path = f"/content-type-schemas/{schema.id}"
        data = self._client.request_json("PATCH", path, json=payload)
        return _parse_schema(data, path)
