"""Canonical catalog aggregate and its members.

A ``Catalog`` is built once per ingested payload and never mutated afterwards:
collections are frozensets and mappings are exposed through read-only
``MappingProxyType`` views. Resource parameters and attributes are frozen
all the way down: nested lists become tuples, nested sets frozensets and
nested mappings read-only views. Iteration order over the sets is unspecified;
compare with set equality.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final, TypeAlias, TypeVar

from .enums import RelationshipKind
from .identifiers import ResourceIdentifier

FORMAT_VERSION: Final[int] = 1

AliasTable: TypeAlias = Mapping[ResourceIdentifier, ResourceIdentifier]
ResourceMap: TypeAlias = Mapping[ResourceIdentifier, "Resource"]

K = TypeVar("K")
V = TypeVar("V")


def _frozen_mapping(value: Mapping[K, V]) -> Mapping[K, V]:
    if isinstance(value, MappingProxyType):
        return value
    return MappingProxyType(dict(value))


def _deep_freeze(value: object) -> object:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _deep_freeze(item) for key, item in value.items()})
    if isinstance(value, list | tuple):
        return tuple(_deep_freeze(item) for item in value)
    if isinstance(value, set | frozenset):
        return frozenset(_deep_freeze(item) for item in value)
    return value


def _frozen_record(value: Mapping[str, object]) -> Mapping[str, object]:
    return MappingProxyType({key: _deep_freeze(item) for key, item in value.items()})


@dataclass(frozen=True, slots=True)
class Resource:
    """A typed, titled entity carrying tags and parameters.

    ``attributes`` holds every other wire attribute (``file``, ``line``,
    ``exported`` ...) verbatim.
    """

    type: str
    title: str
    tags: frozenset[str] = frozenset()
    parameters: Mapping[str, object] = field(default_factory=dict[str, object])
    attributes: Mapping[str, object] = field(default_factory=dict[str, object])

    def __post_init__(self) -> None:
        # validates type/title
        ResourceIdentifier(type=self.type, title=self.title)
        object.__setattr__(self, "tags", frozenset(self.tags))
        object.__setattr__(self, "parameters", _frozen_record(self.parameters))
        object.__setattr__(self, "attributes", _frozen_record(self.attributes))

    @property
    def identifier(self) -> ResourceIdentifier:
        return ResourceIdentifier(type=self.type, title=self.title)


@dataclass(frozen=True, slots=True, order=True)
class DependencyEdge:
    """Directed relationship between two resource identifiers."""

    source: ResourceIdentifier
    target: ResourceIdentifier
    relationship: RelationshipKind

    def __str__(self) -> str:
        return f"{self.source} -[{self.relationship}]-> {self.target}"

    def endpoints(self) -> tuple[ResourceIdentifier, ResourceIdentifier]:
        return (self.source, self.target)

    def rewired(
        self, *, source: ResourceIdentifier, target: ResourceIdentifier
    ) -> DependencyEdge:
        """Return a copy with replaced endpoints and the same relationship."""

        return DependencyEdge(source=source, target=target, relationship=self.relationship)

    def to_wire(self) -> dict[str, str]:
        """Render the edge back into its wire record form."""

        return {
            "source": str(self.source),
            "target": str(self.target),
            "relationship": self.relationship.value,
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class Catalog:
    """Fully normalized, integrity-checked configuration graph."""

    certname: str
    api_version: str
    version: str
    format_version: int = FORMAT_VERSION
    classes: frozenset[str] = frozenset()
    tags: frozenset[str] = frozenset()
    resources: ResourceMap = field(default_factory=dict[ResourceIdentifier, Resource])
    edges: frozenset[DependencyEdge] = frozenset()
    aliases: AliasTable = field(default_factory=dict[ResourceIdentifier, ResourceIdentifier])

    def __post_init__(self) -> None:
        object.__setattr__(self, "classes", frozenset(self.classes))
        object.__setattr__(self, "tags", frozenset(self.tags))
        object.__setattr__(self, "edges", frozenset(self.edges))
        object.__setattr__(self, "resources", _frozen_mapping(self.resources))
        object.__setattr__(self, "aliases", _frozen_mapping(self.aliases))

    def resource(self, identifier: ResourceIdentifier) -> Resource | None:
        return self.resources.get(identifier)

    def edges_from(self, identifier: ResourceIdentifier) -> frozenset[DependencyEdge]:
        return frozenset(edge for edge in self.edges if edge.source == identifier)

    def edges_to(self, identifier: ResourceIdentifier) -> frozenset[DependencyEdge]:
        return frozenset(edge for edge in self.edges if edge.target == identifier)
