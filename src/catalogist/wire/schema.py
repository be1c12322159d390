"""Pydantic models describing the wire-format catalog payload.

Keys are expected in canonical snake_case form; see
``catalogist.domain.ingest_pipeline.keys`` for the mapping applied before
validation.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

log = logging.getLogger(__name__)

# Bounds the memory spent on keys from untrusted payloads.
MAX_TRACKED_EXTRA_KEYS = 256


def _stringify_number(value: object) -> object:
    # bool is an int subclass but never a valid version
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        return str(value)
    return value


class WireBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)
    _logged_extra_keys: ClassVar[dict[str, set[str]]] = {}

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        seen = self._logged_extra_keys.setdefault(type(self).__name__, set())
        new_keys = set(extras).difference(seen)
        if not new_keys:
            return
        if len(seen) + len(new_keys) <= MAX_TRACKED_EXTRA_KEYS:
            seen.update(new_keys)
        log.warning(
            "Catalog %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class WireMetadata(WireBaseModel):
    api_version: str

    _normalize_api_version = field_validator("api_version", mode="before")(_stringify_number)


class WireEdge(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    source: str
    target: str
    relationship: str


class WireResource(BaseModel):
    """A single resource record; unknown attributes are kept verbatim."""

    model_config = ConfigDict(extra="allow", frozen=True)

    type: str = Field(min_length=1)
    title: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    parameters: dict[str, Any] = Field(default_factory=dict)

    @field_validator("tags", "parameters", mode="before")
    @classmethod
    def _null_to_empty(cls, value: object, info: ValidationInfo) -> object:
        if value is None:
            return [] if info.field_name == "tags" else {}
        return value

    @property
    def attributes(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class WireCatalogData(WireBaseModel):
    name: str = Field(min_length=1)
    version: str
    resources: list[dict[str, Any]]
    edges: list[WireEdge]
    classes: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    _normalize_version = field_validator("version", mode="before")(_stringify_number)


class WireEnvelope(WireBaseModel):
    metadata: WireMetadata
    data: WireCatalogData
