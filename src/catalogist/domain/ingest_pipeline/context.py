"""Shared context structures for the catalog pipeline (draft + counters)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar

from catalogist.config.pipeline import PipelineSettings
from catalogist.domain.model import FORMAT_VERSION, Catalog

T = TypeVar("T")

if TYPE_CHECKING:
    from collections.abc import Mapping

    from catalogist.domain.model import AliasTable, DependencyEdge, ResourceMap
    from catalogist.wire.schema import WireEdge, WireResource


@dataclass(slots=True)
class ParseCounters:
    """Diagnostics gathered while parsing one payload."""

    resource_records: int = 0
    edge_records: int = 0
    duplicate_edges_collapsed: int = 0
    resources_overwritten: int = 0
    aliases_overwritten: int = 0
    alias_edges_collapsed: int = 0


@dataclass(slots=True)
class PipelineContext:
    """Per-call context handed to every phase; never shared between payloads."""

    settings: PipelineSettings = field(default_factory=PipelineSettings)
    counters: ParseCounters = field(default_factory=ParseCounters)


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogDraft:
    """Intermediate aggregate passed from phase to phase.

    Phases never mutate a draft; they return a copy (``dataclasses.replace``)
    with the fields they are responsible for filled in. ``require`` guards
    against phases running out of order.
    """

    payload: object
    certname: str | None = None
    api_version: str | None = None
    version: str | None = None
    format_version: int = FORMAT_VERSION
    raw_resources: tuple[Mapping[str, object], ...] | None = None
    raw_edges: tuple[WireEdge, ...] | None = None
    raw_classes: tuple[str, ...] | None = None
    raw_tags: tuple[str, ...] | None = None
    resource_records: tuple[WireResource, ...] | None = None
    edges: frozenset[DependencyEdge] | None = None
    resources: ResourceMap | None = None
    aliases: AliasTable | None = None
    classes: frozenset[str] | None = None
    tags: frozenset[str] | None = None
    catalog: Catalog | None = None

    def require(self, value: T | None, name: str) -> T:
        if value is None:
            raise RuntimeError(f"Catalog draft is missing {name!r}; phases ran out of order")
        return value

    def to_catalog(self) -> Catalog:
        """Assemble the canonical aggregate from a fully populated draft."""

        return Catalog(
            certname=self.require(self.certname, "certname"),
            api_version=self.require(self.api_version, "api_version"),
            version=self.require(self.version, "version"),
            format_version=self.format_version,
            classes=self.require(self.classes, "classes"),
            tags=self.require(self.tags, "tags"),
            resources=self.require(self.resources, "resources"),
            edges=self.require(self.edges, "edges"),
            aliases=self.require(self.aliases, "aliases"),
        )
