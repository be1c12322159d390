"""Catalog normalization pipeline.

The pipeline turns a wire-format catalog payload into a canonical ``Catalog``
in explicit phases: restructure the envelope, validate resource records,
normalize edges, index resources, resolve aliases, canonicalize class/tag
sets and finally check edge integrity. Each phase returns a new
``CatalogDraft``; none mutates its input.
"""

from __future__ import annotations

from .aliases import (
    AliasResolutionPhase,
    alias_values,
    aliases_for_resource,
    build_alias_table,
    collect_aliases,
    resolve_edges,
)
from .context import CatalogDraft, ParseCounters, PipelineContext
from .edges import EdgeNormalizationPhase, normalize_edge, normalize_edges, normalize_relationship
from .integrity import IntegrityPhase, check_edge_integrity
from .keys import canonical_key, canonicalize_keys
from .orchestrator import IngestionPipeline, PipelinePhase
from .resources import ResourceIndexingPhase, build_resource, index_resources
from .restructure import ResourceRecordsPhase, RestructurePhase
from .runner import build_default_pipeline, parse_catalog
from .sets import SetCanonicalizationPhase
from .specifiers import format_resource_spec, parse_resource_spec

__all__ = [
    "AliasResolutionPhase",
    "CatalogDraft",
    "EdgeNormalizationPhase",
    "IngestionPipeline",
    "IntegrityPhase",
    "ParseCounters",
    "PipelineContext",
    "PipelinePhase",
    "ResourceIndexingPhase",
    "ResourceRecordsPhase",
    "RestructurePhase",
    "SetCanonicalizationPhase",
    "alias_values",
    "aliases_for_resource",
    "build_alias_table",
    "build_default_pipeline",
    "build_resource",
    "canonical_key",
    "canonicalize_keys",
    "check_edge_integrity",
    "collect_aliases",
    "format_resource_spec",
    "index_resources",
    "normalize_edge",
    "normalize_edges",
    "normalize_relationship",
    "parse_catalog",
    "parse_resource_spec",
    "resolve_edges",
]
