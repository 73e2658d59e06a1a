"""Standard JSON:API pagination strategies."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit

from httpx_jsonapi.utils.query_params import parse_query_string

from .base import PaginationBase


class LinkPagination(PaginationBase):
    """Follow the ``links.next`` URL the server returns."""

    def next_params(self, document: dict[str, Any], params: dict[str, Any]) -> dict[str, Any] | None:
        next_link = (document.get("links") or {}).get("next")
        if isinstance(next_link, dict):
            next_link = next_link.get("href")
        if not next_link:
            return None
        return parse_query_string(urlsplit(next_link).query)


class StandardPagination(PaginationBase):
    """Advance page[offset] by page[limit] until a short page comes back."""

    def __init__(self, limit: int = 10) -> None:
        self.limit = limit

    def next_params(self, document: dict[str, Any], params: dict[str, Any]) -> dict[str, Any] | None:
        page = params.get("page", {})
        offset = int(page.get("offset", 0))
        limit = int(page.get("limit", self.limit))
        data = document.get("data")
        if not isinstance(data, list) or len(data) < limit:
            return None
        return {**params, "page": {**page, "offset": offset + limit, "limit": limit}}
