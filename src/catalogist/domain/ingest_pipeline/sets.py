"""Set canonicalization for the catalog-level class and tag lists."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from catalogist.domain.ingest_pipeline.orchestrator import PipelinePhase

if TYPE_CHECKING:
    from collections.abc import Iterable

    from catalogist.domain.ingest_pipeline.context import CatalogDraft, PipelineContext


def canonical_set(values: Iterable[str]) -> frozenset[str]:
    return frozenset(values)


class SetCanonicalizationPhase(PipelinePhase):
    """Turn the catalog's class and tag lists into sets."""

    name: str = "set_canonicalization"

    def run(self, draft: CatalogDraft, *, context: PipelineContext) -> CatalogDraft:
        _ = context
        classes = draft.require(draft.raw_classes, "raw_classes")
        tags = draft.require(draft.raw_tags, "raw_tags")
        return replace(draft, classes=canonical_set(classes), tags=canonical_set(tags))
