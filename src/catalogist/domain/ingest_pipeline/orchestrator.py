"""Phase-based orchestrator for the catalog pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from catalogist.domain.ingest_pipeline.context import CatalogDraft, PipelineContext

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

log = getLogger(__name__)


class PipelinePhase(Protocol):
    """Contract implemented by each pipeline phase."""

    name: str

    def run(self, draft: CatalogDraft, *, context: PipelineContext) -> CatalogDraft: ...


@dataclass(slots=True)
class IngestionPipeline:
    """Compose and execute the ordered pipeline phases.

    Each phase receives the draft produced by the previous one and returns a
    new draft. An exception from any phase aborts the run and the partial
    drafts are dropped with it.
    """

    phases: Sequence[PipelinePhase] = field(default_factory=tuple)

    def with_phase(self, phase: PipelinePhase) -> IngestionPipeline:
        """Return a new pipeline appending ``phase`` at the end."""

        return IngestionPipeline(phases=(*self.phases, phase))

    def extend(self, phases: Iterable[PipelinePhase]) -> IngestionPipeline:
        """Return a new pipeline with the provided ``phases`` concatenated."""

        return IngestionPipeline(phases=(*self.phases, *tuple(phases)))

    def run(self, draft: CatalogDraft, *, context: PipelineContext | None = None) -> CatalogDraft:
        """Execute the configured phases in-order starting from ``draft``."""

        active_context = context or PipelineContext()
        current = draft
        for phase in self.phases:
            log.debug("Running catalog phase %s", phase.name)
            current = phase.run(current, context=active_context)
        return current
