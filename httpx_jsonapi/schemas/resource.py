"""Pydantic schemas for JSON:API v1.1 response documents."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict


class JSONAPIResourceIdentifier(BaseModel):
    """Resource identifier object: type + id."""

    model_config = ConfigDict(extra="allow")

    type: str
    id: Union[str, int]


class JSONAPIRelationship(BaseModel):
    """Relationship object; linkage is optional when links are given."""

    model_config = ConfigDict(extra="allow")

    data: Union[JSONAPIResourceIdentifier, List[JSONAPIResourceIdentifier], None] = None


class JSONAPIResource(BaseModel):
    """Resource object with attributes and relationships."""

    model_config = ConfigDict(extra="allow")

    type: str
    id: Optional[Union[str, int]] = None
    attributes: Optional[Dict[str, Any]] = None
    relationships: Optional[Dict[str, JSONAPIRelationship]] = None


class JSONAPIDocument(BaseModel):
    """Top-level JSON:API document."""

    model_config = ConfigDict(extra="allow")

    data: Union[JSONAPIResource, List[JSONAPIResource], None] = None
    included: Optional[List[JSONAPIResource]] = None
    meta: Optional[Dict[str, Any]] = None
    links: Optional[Dict[str, Any]] = None


class JSONAPIErrorDocument(BaseModel):
    """Top-level JSON:API error document."""

    model_config = ConfigDict(extra="allow")

    errors: List[Dict[str, Any]]
