"""Public domain model surface."""

from __future__ import annotations

from catalogist.domain.model.catalog import (
    FORMAT_VERSION,
    AliasTable,
    Catalog,
    DependencyEdge,
    Resource,
    ResourceMap,
)
from catalogist.domain.model.enums import DuplicatePolicy, RelationshipKind
from catalogist.domain.model.identifiers import ResourceIdentifier

__all__ = [
    "FORMAT_VERSION",
    "AliasTable",
    "Catalog",
    "DependencyEdge",
    "DuplicatePolicy",
    "RelationshipKind",
    "Resource",
    "ResourceIdentifier",
    "ResourceMap",
]
