"""Resource indexing: turn the resource list into an identifier-keyed mapping."""

from __future__ import annotations

from dataclasses import dataclass, replace
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING

from catalogist.domain.errors import DuplicateResourceError
from catalogist.domain.ingest_pipeline.orchestrator import PipelinePhase
from catalogist.domain.model import DuplicatePolicy, Resource, ResourceIdentifier

if TYPE_CHECKING:
    from collections.abc import Iterable

    from catalogist.domain.ingest_pipeline.context import CatalogDraft, PipelineContext
    from catalogist.domain.model import ResourceMap
    from catalogist.wire.schema import WireResource

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IndexedResources:
    resources: ResourceMap
    overwritten: tuple[ResourceIdentifier, ...] = ()


def build_resource(record: WireResource) -> Resource:
    """Convert a validated wire record; the tag list becomes a set."""

    return Resource(
        type=record.type,
        title=record.title,
        tags=frozenset(record.tags),
        parameters=record.parameters,
        attributes=record.attributes,
    )


def index_resources(
    records: Iterable[WireResource],
    *,
    policy: DuplicatePolicy = DuplicatePolicy.OVERWRITE,
) -> IndexedResources:
    """Key resources by identifier.

    Under ``OVERWRITE`` a later record replaces an earlier one with the same
    identifier and the replacement is logged; under ``REJECT`` it raises
    ``DuplicateResourceError``.
    """

    indexed: dict[ResourceIdentifier, Resource] = {}
    overwritten: list[ResourceIdentifier] = []
    for record in records:
        resource = build_resource(record)
        identifier = resource.identifier
        if identifier in indexed:
            if policy is DuplicatePolicy.REJECT:
                raise DuplicateResourceError(identifier)
            log.warning("Resource %s is declared more than once; keeping the last", identifier)
            overwritten.append(identifier)
        indexed[identifier] = resource
    return IndexedResources(resources=MappingProxyType(indexed), overwritten=tuple(overwritten))


class ResourceIndexingPhase(PipelinePhase):
    name: str = "resource_indexing"

    def run(self, draft: CatalogDraft, *, context: PipelineContext) -> CatalogDraft:
        records = draft.require(draft.resource_records, "resource_records")
        result = index_resources(records, policy=context.settings.duplicate_policy)
        context.counters.resources_overwritten += len(result.overwritten)
        return replace(draft, resources=result.resources)
