"""Helpers for JSON:API content negotiation."""

from __future__ import annotations

from typing import Any

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"

JSONAPI_HEADERS: dict[str, str] = {
    "Accept": JSONAPI_MEDIA_TYPE,
    "Content-Type": JSONAPI_MEDIA_TYPE,
}

JSON_MEDIA_TYPES = frozenset({JSONAPI_MEDIA_TYPE, "application/json"})


def _split_parameters(value: str) -> list[str]:
    return [part.strip() for part in value.split(";") if part.strip()]


def _parse_param_value(value: str) -> list[str]:
    if value.startswith('"') and value.endswith('"'):
        value = value[1:-1]
    if not value:
        return []
    return value.split(" ")


def parse_jsonapi_media_type(content_type: str) -> dict[str, Any]:
    """Parse a Content-Type header into its media type and ext/profile parameters."""
    parts = _split_parameters(content_type)
    media_type = parts[0].lower() if parts else ""
    params: dict[str, Any] = {"media_type": media_type, "ext": [], "profile": []}

    for param in parts[1:]:
        if "=" not in param:
            continue
        name, raw_value = param.split("=", 1)
        name = name.strip().lower()
        raw_value = raw_value.strip()
        if name in {"ext", "profile"}:
            params[name] = _parse_param_value(raw_value)
        else:
            params.setdefault("other_params", {})[name] = raw_value
    return params


def is_json_content(content_type: str | None) -> bool:
    """Return True when the header names a JSON or JSON:API body."""
    if not content_type:
        return False
    return parse_jsonapi_media_type(content_type)["media_type"] in JSON_MEDIA_TYPES
