"""Helpers for JSON:API query string construction and parsing."""

from __future__ import annotations

import re
from typing import Any, Mapping
from urllib.parse import parse_qsl, quote

_BRACKETS = re.compile(r"\[([^\]]*)\]")


def _split_csv(value: str) -> list[str]:
    return [item for item in (part.strip() for part in value.split(",")) if item]


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_format_value(item) for item in value)
    return str(value)


def _encode_params(params: Mapping[str, Any], prefix: str | None) -> list[str]:
    pairs: list[str] = []
    for key, value in params.items():
        if value is None:
            continue
        name = f"{prefix}[{key}]" if prefix else str(key)
        if isinstance(value, Mapping):
            pairs.extend(_encode_params(value, name))
        else:
            pairs.append(f"{quote(name, safe='')}={quote(_format_value(value), safe='')}")
    return pairs


def build_query(params: Mapping[str, Any] | None, prefix: str | None = None) -> str:
    """Serialise nested JSON:API query parameters.

    Nested mappings become bracketed keys (``page[limit]``), lists are joined
    with commas and ``None`` values are skipped. Returns the query string with
    a leading ``?``, or ``""`` when there is nothing to send.

    >>> build_query({"filter": {"slug": "trigun"}, "include": ["genres", "staff"]})
    '?filter%5Bslug%5D=trigun&include=genres%2Cstaff'
    """
    if not params:
        return ""
    pairs = _encode_params(params, prefix)
    return f"?{'&'.join(pairs)}" if pairs else ""


def parse_query_string(query: str) -> dict[str, Any]:
    """Parse a query string back into nested JSON:API parameters.

    ``page[offset]=20&filter[name][eq]=x`` becomes
    ``{"page": {"offset": "20"}, "filter": {"name": {"eq": "x"}}}``. Values
    stay strings, except ``include`` which is split into a list.
    """
    normalized: dict[str, Any] = {}
    for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        root, _, rest = key.partition("[")
        path = [root] + _BRACKETS.findall(f"[{rest}") if rest else [root]
        node = normalized
        for part in path[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        if key == "include":
            node[path[-1]] = _split_csv(value)
        else:
            node[path[-1]] = value
    return normalized
