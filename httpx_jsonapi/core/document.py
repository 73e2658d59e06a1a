"""JSON:API request document construction."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from httpx_jsonapi.utils.case import Transform, identity


class JSONAPIDocumentBuilder:
    """Build JSON:API v1.1 request documents from plain mappings.

    ``type_case`` and ``pluralize`` are applied to the resource type and to
    relationship keys that do not name their own type.
    """

    def __init__(self, *, type_case: Transform = identity, pluralize: Transform = identity) -> None:
        self.type_case = type_case
        self.pluralize = pluralize

    def resource_type(self, name: str) -> str:
        """Return the document ``type`` for a model or relationship name."""
        return self.pluralize(self.type_case(name))

    def resource_object(
        self, type_: str, node: Mapping[str, Any], *, method: str = "POST"
    ) -> dict[str, Any]:
        """Return a JSON:API resource object for one body mapping."""
        if not isinstance(node, Mapping):
            raise TypeError(f"{method} requires an object or a list of objects, got {type(node).__name__}.")
        if method != "POST" and node.get("id") in (None, ""):
            raise ValueError(f"{method} requires an id for the {type_} type.")

        resource: dict[str, Any] = {"type": node.get("type") or type_}
        if node.get("id") not in (None, ""):
            resource["id"] = str(node["id"])

        attributes: dict[str, Any] = {}
        relationships: dict[str, Any] = {}
        for key, value in node.items():
            if key in ("id", "type"):
                continue
            relationship = self.relationship_object(key, value)
            if relationship is None:
                attributes[key] = value
            else:
                relationships[key] = relationship
        if attributes:
            resource["attributes"] = attributes
        if relationships:
            resource["relationships"] = relationships
        return resource

    def relationship_object(self, key: str, value: Any) -> dict[str, Any] | None:
        """Return a relationship object for ``value`` or ``None`` if it is an attribute."""
        if isinstance(value, Mapping):
            if "data" in value:
                return dict(value)
            if "id" in value:
                return {"data": self._identifier(key, value)}
            return None
        if _is_sequence(value) and value and all(
            isinstance(item, Mapping) and "id" in item for item in value
        ):
            return {"data": [self._identifier(key, item) for item in value]}
        return None

    def build_single(
        self, type_: str, node: Mapping[str, Any], *, method: str = "POST"
    ) -> dict[str, Any]:
        """Return a document whose primary data is one resource object."""
        return {"data": self.resource_object(type_, node, method=method)}

    def build_collection(
        self, type_: str, nodes: Iterable[Mapping[str, Any]], *, method: str = "POST"
    ) -> dict[str, Any]:
        """Return a bulk extension document with an array of resource objects."""
        return {"data": [self.resource_object(type_, node, method=method) for node in nodes]}

    def _identifier(self, key: str, related: Mapping[str, Any]) -> dict[str, str]:
        return {"type": related.get("type") or self.resource_type(key), "id": str(related["id"])}


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def serialise(
    type_: str,
    body: Mapping[str, Any] | Sequence[Mapping[str, Any]] | None = None,
    method: str = "POST",
    *,
    type_case: Transform = identity,
    pluralize: Transform = identity,
) -> dict[str, Any]:
    """Serialise a plain body into a JSON:API request document.

    Sequences produce a bulk document. Raises ``TypeError`` for bodies that
    are not mappings and ``ValueError`` when a non-POST body has no ``id``.

    >>> serialise("libraryEntry", {"id": 1, "ratingTwenty": 18}, "PATCH", pluralize=pluralize)
    {'data': {'type': 'libraryEntries', 'id': '1', 'attributes': {'ratingTwenty': 18}}}
    """
    method = method.upper()
    builder = JSONAPIDocumentBuilder(type_case=type_case, pluralize=pluralize)
    resource_type = builder.resource_type(type_)
    if body is None:
        body = {}
    if _is_sequence(body):
        return builder.build_collection(resource_type, body, method=method)
    return builder.build_single(resource_type, body, method=method)
