"""Client configuration.

Defaults can be set through ``JSONAPI_*`` environment variables, e.g.
``JSONAPI_BASE_URL`` or ``JSONAPI_RESOURCE_CASE=snake``. Keyword arguments
given to the client take precedence.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from httpx_jsonapi.utils.case import RESOURCE_CASES, Transform, camel, identity, pluralize

DEFAULT_BASE_URL = "https://kitsu.io/api/edge"


class ClientSettings(BaseSettings):
    """Settings for one client instance; immutable once built."""

    model_config = SettingsConfigDict(
        env_prefix="JSONAPI_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=1,
        description="API root that model paths are appended to.",
    )
    camel_case_types: bool = Field(
        default=True,
        description="Convert kebab-case/snake_case types to camelCase.",
    )
    resource_case: Literal["kebab", "snake", "none"] = Field(
        default="kebab",
        description="Case used for URL segments: /library-entries, /library_entries or /libraryEntries.",
    )
    pluralize: bool = Field(
        default=True,
        description="Pluralise URL resource segments and document types.",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Request timeout in seconds for the default transport.",
    )


@dataclass(frozen=True)
class NamingStrategy:
    """The three naming transforms used by a client.

    ``type_case`` converts document types, ``resource_case`` converts URL
    segments and types before pluralisation, ``pluralize`` pluralises both.
    """

    type_case: Transform = camel
    resource_case: Transform = RESOURCE_CASES["kebab"]
    pluralize: Transform = pluralize

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> NamingStrategy:
        return cls(
            type_case=camel if settings.camel_case_types else identity,
            resource_case=RESOURCE_CASES[settings.resource_case],
            pluralize=pluralize if settings.pluralize else identity,
        )
