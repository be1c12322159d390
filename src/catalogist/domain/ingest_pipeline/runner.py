"""Entry points for running the catalog pipeline."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from catalogist.config.pipeline import PipelineSettings

from .aliases import AliasResolutionPhase
from .context import CatalogDraft, PipelineContext
from .edges import EdgeNormalizationPhase
from .integrity import IntegrityPhase
from .orchestrator import IngestionPipeline
from .resources import ResourceIndexingPhase
from .restructure import ResourceRecordsPhase, RestructurePhase
from .sets import SetCanonicalizationPhase

if TYPE_CHECKING:
    from catalogist.domain.model import Catalog

log = getLogger(__name__)


def build_default_pipeline() -> IngestionPipeline:
    """Return the fixed phase order used for every wire payload.

    Resources are indexed before the alias table is built (the table is keyed
    by indexed identifiers) and after edges are parsed (aliases match parsed
    identifiers). Integrity checking needs the final edges and resources, so
    it runs last.
    """

    return IngestionPipeline(
        phases=(
            RestructurePhase(),
            ResourceRecordsPhase(),
            EdgeNormalizationPhase(),
            ResourceIndexingPhase(),
            AliasResolutionPhase(),
            SetCanonicalizationPhase(),
            IntegrityPhase(),
        )
    )


def parse_catalog(
    payload: object,
    *,
    settings: PipelineSettings | None = None,
    context: PipelineContext | None = None,
) -> Catalog:
    """Turn one decoded wire payload into a canonical, integrity-checked catalog.

    Raises a ``CatalogError`` subclass on the first problem found; nothing is
    returned for a payload that fails any phase. A supplied ``context`` carries
    its own settings, so passing both ``settings`` and ``context`` is a
    ``ValueError``.
    """

    if context is not None and settings is not None:
        raise ValueError("Pass either settings or a context carrying them, not both")
    active_context = context or PipelineContext(settings=settings or PipelineSettings())
    draft = build_default_pipeline().run(CatalogDraft(payload=payload), context=active_context)
    catalog = draft.require(draft.catalog, "catalog")

    counters = active_context.counters
    log.info(
        "Parsed catalog %s version %s: resources=%d, edges=%d, aliases=%d, "
        "collapsed_edges=%d, overwritten_resources=%d",
        catalog.certname,
        catalog.version,
        len(catalog.resources),
        len(catalog.edges),
        len(catalog.aliases),
        counters.duplicate_edges_collapsed + counters.alias_edges_collapsed,
        counters.resources_overwritten,
    )
    return catalog
