"""Integrity checking: every edge endpoint must name an indexed resource."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from catalogist.domain.errors import DanglingReferenceError
from catalogist.domain.ingest_pipeline.orchestrator import PipelinePhase

if TYPE_CHECKING:
    from catalogist.domain.ingest_pipeline.context import CatalogDraft, PipelineContext
    from catalogist.domain.model import Catalog


def check_edge_integrity(catalog: Catalog) -> Catalog:
    """Return ``catalog`` unchanged if all edges resolve, else fail fast.

    Edges are visited in sorted order so the reported violation is the same
    on every run; ``source`` is checked before ``target``.
    """

    for edge in sorted(catalog.edges):
        for endpoint in edge.endpoints():
            if endpoint not in catalog.resources:
                raise DanglingReferenceError(edge=edge, missing=endpoint)
    return catalog


class IntegrityPhase(PipelinePhase):
    """Assemble the catalog and verify referential integrity; must run last."""

    name: str = "integrity"

    def run(self, draft: CatalogDraft, *, context: PipelineContext) -> CatalogDraft:
        _ = context
        return replace(draft, catalog=check_edge_integrity(draft.to_catalog()))
