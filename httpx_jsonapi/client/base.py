"""Asynchronous JSON:API client."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any, AsyncIterator, Iterator, Mapping, Sequence

from httpx_jsonapi.config import ClientSettings, NamingStrategy
from httpx_jsonapi.core.document import serialise
from httpx_jsonapi.core.errors import normalize_error
from httpx_jsonapi.pagination import LinkPagination, PaginationBase
from httpx_jsonapi.serializers import deserialise
from httpx_jsonapi.transport import HttpxTransport, Transport
from httpx_jsonapi.utils.content_negotiation import JSONAPI_HEADERS
from httpx_jsonapi.utils.query_params import build_query
from httpx_jsonapi.utils.split_model import split_model

logger = logging.getLogger(__name__)

ResourceId = str | int


def _overlay(base: Mapping[str, str], headers: Mapping[str, str] | None) -> dict[str, str]:
    """Overlay ``headers`` on ``base``; header names compare case-insensitively."""
    replaced = {key.lower() for key in headers or {}}
    merged = {key: value for key, value in base.items() if key.lower() not in replaced}
    merged.update(headers or {})
    return merged


class JSONAPIClient:
    """Send JSON:API requests built from short model identifiers.

    Args:
        settings: Complete settings; built from the environment when omitted.
        base_url: API root, defaults to ``https://kitsu.io/api/edge``.
        headers: Extra headers sent with every request. ``Accept`` and
            ``Content-Type`` are always the JSON:API media type.
        camel_case_types: Convert document types to camelCase (default True).
        resource_case: ``"kebab"`` (default), ``"snake"`` or ``"none"``.
        pluralize: Pluralise URL segments and document types (default True).
        naming: Custom naming transforms; overrides the three toggles above.
        transport: Custom transport; an ``HttpxTransport`` otherwise.
        transport_options: Keyword options for ``httpx.AsyncClient``.

    Examples:
        async with JSONAPIClient() as api:
            anime = await api.get("anime", {"filter": {"slug": "trigun"}})
            entries = await api.get("users/1/libraryEntries")
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        base_url: str | None = None,
        headers: Mapping[str, str] | None = None,
        camel_case_types: bool | None = None,
        resource_case: str | None = None,
        pluralize: bool | None = None,
        naming: NamingStrategy | None = None,
        transport: Transport | None = None,
        transport_options: Mapping[str, Any] | None = None,
    ) -> None:
        overrides = {
            key: value
            for key, value in {
                "base_url": base_url,
                "camel_case_types": camel_case_types,
                "resource_case": resource_case,
                "pluralize": pluralize,
            }.items()
            if value is not None
        }
        if settings is None:
            settings = ClientSettings(**overrides)
        elif overrides:
            settings = ClientSettings(**{**settings.model_dump(), **overrides})
        self.settings = settings
        self.naming = naming or NamingStrategy.from_settings(settings)
        self.base_url = settings.base_url.rstrip("/")
        self._headers = _overlay(headers or {}, JSONAPI_HEADERS)
        if transport is None:
            transport = HttpxTransport(**{"timeout": settings.timeout, **(transport_options or {})})
        self.transport = transport

    @property
    def headers(self) -> Mapping[str, str]:
        """Headers sent with every request (read-only)."""
        return MappingProxyType(self._headers)

    def merge_headers(self, headers: Mapping[str, str] | None = None) -> dict[str, str]:
        """Return the default headers overlaid with per-call headers."""
        return _overlay(self._headers, headers)

    def build_url(self, path: str, params: Mapping[str, Any] | None = None) -> str:
        return f"{self.base_url}/{path}{build_query(params)}"

    async def __aenter__(self) -> JSONAPIClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying transport."""
        await self.transport.aclose()

    @contextmanager
    def _request_errors(self, method: str, target: str) -> Iterator[None]:
        try:
            yield
        except Exception as exc:
            error = normalize_error(exc)
            if error is exc:
                raise
            logger.debug(
                "%s %s failed with %s (status=%s)",
                method,
                target,
                error.__class__.__name__,
                getattr(error, "status", None),
            )
            raise error from exc

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        data: Any = None,
    ) -> Any:
        url = self.build_url(path, params)
        logger.debug("%s %s", method, url)
        response = await self.transport.perform(
            url=url,
            method=method,
            headers=self.merge_headers(headers),
            data=data,
        )
        return response.data

    def _split_model(self, model: str) -> tuple[str, str]:
        return split_model(
            model,
            resource_case=self.naming.resource_case,
            pluralize=self.naming.pluralize,
        )

    def _serialise(self, type_: str, body: Any, method: str) -> dict[str, Any]:
        return serialise(
            type_,
            body,
            method,
            type_case=self.naming.type_case,
            pluralize=self.naming.pluralize,
        )

    def _deserialise(self, document: Any) -> dict[str, Any]:
        return deserialise(document, type_case=self.naming.type_case)

    async def get(
        self,
        model: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        """Fetch a collection, a resource or a related resource (alias ``fetch``).

        ``model`` is ``collection``, ``collection/id`` or
        ``collection/id/relationship``. The collection is case converted and
        pluralised, the id is sent as is and the relationship is case
        converted only.

        Args:
            model: Model identifier, e.g. ``"users/1/libraryEntries"``.
            params: JSON:API query parameters (``filter``, ``page``, ``sort``,
                ``include``, ``fields`` or any other nested mapping).
            headers: Extra headers for this request.

        Returns:
            The deserialised response document.
        """
        with self._request_errors("GET", model):
            if not model:
                raise ValueError("Model identifier must not be empty.")
            resource, *rest = model.split("/")
            resource_id = rest[0] if rest else None
            relationship = rest[1] if len(rest) > 1 else None

            path = self.naming.pluralize(self.naming.resource_case(resource))
            if resource_id:
                path += f"/{resource_id}"
            if relationship:
                path += f"/{self.naming.resource_case(relationship)}"

            document = await self._send("GET", path, params=params, headers=headers)
            return self._deserialise(document)

    async def patch(
        self,
        model: str,
        body: Mapping[str, Any] | Sequence[Mapping[str, Any]],
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        """Update a resource (alias ``update``).

        ``body["id"]`` addresses the resource. A list of bodies is sent to
        the collection as a bulk update.
        """
        with self._request_errors("PATCH", model):
            resource_type, path = self._split_model(model)
            document = self._serialise(resource_type, body, "PATCH")
            if isinstance(body, Mapping):
                path = f"{path}/{body['id']}"
            response = await self._send("PATCH", path, headers=headers, data=document)
            return self._deserialise(response)

    async def post(
        self,
        model: str,
        body: Mapping[str, Any] | Sequence[Mapping[str, Any]],
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        """Create a resource (alias ``create``)."""
        with self._request_errors("POST", model):
            resource_type, path = self._split_model(model)
            document = self._serialise(resource_type, body, "POST")
            response = await self._send("POST", path, headers=headers, data=document)
            return self._deserialise(response)

    async def delete(
        self,
        model: str,
        id: ResourceId | Sequence[ResourceId],
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Remove a resource, or several with a list of ids (alias ``remove``).

        The response body is returned as received, without deserialisation.
        """
        with self._request_errors("DELETE", model):
            resource_type, path = self._split_model(model)
            if isinstance(id, Sequence) and not isinstance(id, (str, bytes, bytearray)):
                payload: Any = [{"id": item} for item in id]
            else:
                path = f"{path}/{id}"
                payload = {"id": id}
            document = self._serialise(resource_type, payload, "DELETE")
            return await self._send("DELETE", path, headers=headers, data=document)

    async def self(
        self,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any] | None:
        """Fetch the authenticated user.

        Relies on the server supporting ``filter[self]=true``. A server that
        ignores the filter returns its first user instead. Returns ``None``
        when no user comes back, and a single resource as it arrives. A
        ``filter`` in ``params`` replaces the self filter.
        """
        with self._request_errors("GET", "users"):
            response = await self.get("users", {"filter": {"self": True}, **(params or {})}, headers)
            users = response.get("data")
            if isinstance(users, Mapping):
                return users
            return users[0] if users else None

    async def request(
        self,
        *,
        url: str,
        type_: str | None = None,
        body: Any = None,
        method: str = "GET",
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        """Send a request to an exact path.

        No model resolution happens: ``url`` is appended to the base URL as
        given. ``method`` is case-insensitive. GET and DELETE never send a
        body; other methods serialise ``body`` under ``type_``.
        """
        method = (method or "GET").upper()
        with self._request_errors(method, url):
            document = None
            if method not in ("GET", "DELETE"):
                if not type_:
                    raise ValueError(f"{method} requests require a resource type.")
                document = self._serialise(type_, body, method)
            response = await self._send(method, url, params=params, headers=headers, data=document)
            return self._deserialise(response)

    async def paginate(
        self,
        model: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        *,
        pagination: PaginationBase | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        """Yield each page of a collection, following ``links.next`` by default."""
        pagination = pagination or LinkPagination()
        page_params: dict[str, Any] | None = dict(params or {})
        while page_params is not None:
            page = await self.get(model, page_params, headers)
            yield page
            page_params = pagination.next_params(page, page_params)

    fetch = get
    update = patch
    create = post
    remove = delete
