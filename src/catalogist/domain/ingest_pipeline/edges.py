"""Edge normalization: wire edge records into a set of dependency edges.

Turns edges that look like::

    {"source": "Class[foo]", "target": "User[bar]", "relationship": "contains"}

into ``DependencyEdge(source=Class[foo], target=User[bar], relationship=CONTAINS)``.
Duplicate triples collapse because the result is a set.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING, TypeAlias

from catalogist.domain.errors import InvalidRelationshipError, MalformedPayloadError
from catalogist.domain.ingest_pipeline.orchestrator import PipelinePhase
from catalogist.domain.ingest_pipeline.specifiers import parse_resource_spec
from catalogist.domain.model import DependencyEdge, RelationshipKind
from catalogist.wire.schema import WireEdge

if TYPE_CHECKING:
    from collections.abc import Iterable

    from catalogist.domain.ingest_pipeline.context import CatalogDraft, PipelineContext

log = getLogger(__name__)

EdgeRecord: TypeAlias = WireEdge | Mapping[str, object] | DependencyEdge

_EDGE_FIELDS = ("source", "target", "relationship")


def normalize_relationship(relationship: str) -> RelationshipKind:
    """Map a wire relationship keyword onto ``RelationshipKind`` (case-sensitive)."""

    try:
        return RelationshipKind(relationship)
    except ValueError as exc:
        raise InvalidRelationshipError(relationship) from exc


def _edge_fields(record: WireEdge | Mapping[str, object]) -> tuple[str, str, str]:
    if isinstance(record, WireEdge):
        return record.source, record.target, record.relationship

    values: list[str] = []
    for name in _EDGE_FIELDS:
        value = record.get(name)
        if not isinstance(value, str):
            raise MalformedPayloadError(
                "Edge record is malformed", errors=(f"{name}: expected a string, got {value!r}",)
            )
        values.append(value)
    source, target, relationship = values
    return source, target, relationship


def normalize_edge(record: EdgeRecord) -> DependencyEdge:
    """Parse one edge record; already-normalized edges pass through unchanged."""

    if isinstance(record, DependencyEdge):
        return record
    source, target, relationship = _edge_fields(record)
    return DependencyEdge(
        source=parse_resource_spec(source),
        target=parse_resource_spec(target),
        relationship=normalize_relationship(relationship),
    )


def normalize_edges(records: Iterable[EdgeRecord]) -> frozenset[DependencyEdge]:
    return frozenset(normalize_edge(record) for record in records)


class EdgeNormalizationPhase(PipelinePhase):
    name: str = "edge_normalization"

    def run(self, draft: CatalogDraft, *, context: PipelineContext) -> CatalogDraft:
        raw = draft.require(draft.raw_edges, "raw_edges")
        edges = normalize_edges(raw)
        collapsed = len(raw) - len(edges)
        context.counters.duplicate_edges_collapsed += collapsed
        if collapsed:
            log.debug("Collapsed %d duplicate edge records", collapsed)
        return replace(draft, edges=edges)
