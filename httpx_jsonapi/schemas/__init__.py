"""Pydantic models used to validate JSON:API response documents."""

from .resource import (
    JSONAPIDocument,
    JSONAPIErrorDocument,
    JSONAPIRelationship,
    JSONAPIResource,
    JSONAPIResourceIdentifier,
)

__all__ = [
    "JSONAPIDocument",
    "JSONAPIErrorDocument",
    "JSONAPIRelationship",
    "JSONAPIResource",
    "JSONAPIResourceIdentifier",
]
