"""Flatten JSON:API response documents into plain nested data."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from httpx_jsonapi.schemas import JSONAPIDocument
from httpx_jsonapi.utils.case import Transform, identity

ResourceKey = tuple[str, str]


class JSONAPIDeserializer:
    """Turn JSON:API resource objects into plain mappings.

    Attributes are merged onto the resource, and relationship data is
    replaced with the matching ``included`` resources, flattened the same
    way. A resource that is already being linked higher up the chain is
    left as its identifier so circular relationships terminate.
    """

    def __init__(
        self,
        included: Iterable[Mapping[str, Any]] | None = None,
        *,
        type_case: Transform = identity,
    ) -> None:
        self.type_case = type_case
        self.included: dict[ResourceKey, Mapping[str, Any]] = {
            self.get_key(item): item for item in included or []
        }

    def get_key(self, resource: Mapping[str, Any]) -> ResourceKey:
        """Return the ``(type, id)`` lookup key of a resource or identifier."""
        return resource.get("type", ""), str(resource.get("id", ""))

    def deserialise(self, document: Mapping[str, Any]) -> dict[str, Any]:
        """Return the document with flattened primary data and no ``included``."""
        result = {key: value for key, value in document.items() if key != "included"}
        data = document.get("data")
        if isinstance(data, list):
            result["data"] = [self.to_plain(resource) for resource in data]
        elif isinstance(data, Mapping):
            result["data"] = self.to_plain(data)
        return result

    def to_plain(
        self, resource: Mapping[str, Any], linking: frozenset[ResourceKey] = frozenset()
    ) -> dict[str, Any]:
        """Flatten one resource object."""
        linking = linking | {self.get_key(resource)}
        node = {
            key: value
            for key, value in resource.items()
            if key not in ("attributes", "relationships")
        }
        if "type" in node:
            node["type"] = self.type_case(node["type"])
        node.update(resource.get("attributes") or {})
        for name, relationship in (resource.get("relationships") or {}).items():
            node[name] = self.link(relationship, linking)
        return node

    def link(self, relationship: Any, linking: frozenset[ResourceKey]) -> Any:
        """Replace relationship data with linked resources."""
        if not isinstance(relationship, Mapping) or "data" not in relationship:
            return relationship
        linked = dict(relationship)
        data = relationship["data"]
        if isinstance(data, list):
            linked["data"] = [self.resolve(identifier, linking) for identifier in data]
        elif isinstance(data, Mapping):
            linked["data"] = self.resolve(data, linking)
        return linked

    def resolve(self, identifier: Mapping[str, Any], linking: frozenset[ResourceKey]) -> dict[str, Any]:
        key = self.get_key(identifier)
        included = self.included.get(key)
        if included is None or key in linking:
            plain = dict(identifier)
            if "type" in plain:
                plain["type"] = self.type_case(plain["type"])
            return plain
        return self.to_plain(included, linking)


def deserialise(document: Mapping[str, Any] | None, *, type_case: Transform = identity) -> dict[str, Any]:
    """Validate and flatten a JSON:API document.

    Empty bodies (``None`` or ``{}``, e.g. a 204 response) give ``{}``.
    Raises ``pydantic.ValidationError`` for documents with an invalid shape.
    """
    if not document:
        return {}
    JSONAPIDocument.model_validate(document)
    deserializer = JSONAPIDeserializer(document.get("included"), type_case=type_case)
    return deserializer.deserialise(document)
