"""JSON:API client error types and normalization."""

from __future__ import annotations

import json
from typing import Any

import httpx
from pydantic import ValidationError

from httpx_jsonapi.schemas import JSONAPIErrorDocument
from httpx_jsonapi.utils.content_negotiation import is_json_content


class JSONAPIClientError(Exception):
    """Base class for every normalized request failure.

    Attributes:
        status: HTTP status code, or ``None`` when no response was received.
        errors: JSON:API error objects returned by the server (may be empty).
        response: Parsed response body, raw text, or ``None``.
    """

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        errors: list[dict[str, Any]] | None = None,
        response: Any = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.errors = errors or []
        self.response = response


class JSONAPIResponseError(JSONAPIClientError):
    """The server answered with a non-2xx status."""


class JSONAPITransportError(JSONAPIClientError):
    """The request never produced a response (connection, timeout, protocol)."""


class JSONAPIDocumentError(JSONAPIClientError):
    """A body could not be parsed or is not a JSON:API document."""


def _error_objects(body: Any) -> list[dict[str, Any]]:
    if not isinstance(body, dict) or "errors" not in body:
        return []
    try:
        return JSONAPIErrorDocument.model_validate(body).errors
    except ValidationError:
        return []


def _response_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    if is_json_content(response.headers.get("content-type")):
        try:
            return response.json()
        except ValueError:
            pass
    return response.text


def from_status_error(exc: httpx.HTTPStatusError) -> JSONAPIResponseError:
    """Build a response error from a non-2xx httpx response."""
    response = exc.response
    body = _response_body(response)
    errors = _error_objects(body)
    if errors:
        first = errors[0]
        detail = first.get("detail") or first.get("title") or response.reason_phrase
    else:
        detail = response.reason_phrase
    return JSONAPIResponseError(
        f"{response.status_code} {detail}".strip(),
        status=response.status_code,
        errors=errors,
        response=body,
    )


def normalize_error(exc: BaseException) -> BaseException:
    """Map a failure raised inside a request to its normalized form.

    Already normalized errors are returned unchanged so they are never wrapped
    twice. Exceptions that are not request failures (bad caller input) are
    also returned unchanged.
    """
    if isinstance(exc, JSONAPIClientError):
        return exc
    if isinstance(exc, httpx.HTTPStatusError):
        return from_status_error(exc)
    if isinstance(exc, httpx.RequestError):
        return JSONAPITransportError(str(exc) or exc.__class__.__name__)
    if isinstance(exc, json.JSONDecodeError):
        return JSONAPIDocumentError(f"Response is not valid JSON: {exc.msg}", response=exc.doc)
    if isinstance(exc, UnicodeDecodeError):
        return JSONAPIDocumentError(f"Response is not valid {exc.encoding}: {exc.reason}")
    if isinstance(exc, ValidationError):
        return JSONAPIDocumentError(
            f"Malformed JSON:API document: {exc.error_count()} validation error(s)",
            errors=[
                {
                    "title": "Invalid document",
                    "detail": error["msg"],
                    "source": {"pointer": "/" + "/".join(str(loc) for loc in error["loc"])},
                }
                for error in exc.errors()
            ],
        )
    return exc
