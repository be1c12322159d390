"""Restructure phases: validate the wire envelope and its resource records.

The wire payload carries two sections. ``metadata`` holds protocol details
(the API version); ``data`` holds the catalog content. Hoisting pulls
``certname``/``version``/``api_version`` to the top of the draft.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from catalogist.domain.errors import MalformedPayloadError
from catalogist.domain.ingest_pipeline.keys import canonicalize_keys
from catalogist.domain.ingest_pipeline.orchestrator import PipelinePhase
from catalogist.wire.schema import WireEnvelope, WireResource

if TYPE_CHECKING:
    from catalogist.domain.ingest_pipeline.context import CatalogDraft, PipelineContext

log = getLogger(__name__)

_SECTIONS = ("metadata", "data")


def validation_messages(exc: ValidationError, *, prefix: str = "") -> tuple[str, ...]:
    """Flatten pydantic errors into ``location: message`` strings."""

    messages: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        if prefix:
            location = f"{prefix}.{location}" if location else prefix
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return tuple(messages)


def _require_string_keys(record: Mapping[object, object], *, location: str) -> None:
    bad = [key for key in record if not isinstance(key, str)]
    if bad:
        raise MalformedPayloadError(
            "Catalog payload has non-string keys",
            errors=tuple(f"{location}: key {key!r} is not a string" for key in bad),
        )


def canonicalize_envelope(payload: object) -> dict[str, object]:
    """Canonicalize top-level keys and the keys of both known sections.

    Non-string keys are a payload problem here, not a caller bug, and raise
    ``MalformedPayloadError``.
    """

    if not isinstance(payload, Mapping):
        raise MalformedPayloadError(
            f"Catalog payload must be an object, got {type(payload).__name__}"
        )
    _require_string_keys(payload, location="<root>")
    envelope = canonicalize_keys(payload)
    for section in _SECTIONS:
        value = envelope.get(section)
        if isinstance(value, Mapping):
            _require_string_keys(value, location=section)
            envelope[section] = canonicalize_keys(value)
    return envelope


class RestructurePhase(PipelinePhase):
    """Validate the envelope and hoist catalog metadata onto the draft."""

    name: str = "restructure"

    def run(self, draft: CatalogDraft, *, context: PipelineContext) -> CatalogDraft:
        envelope = canonicalize_envelope(draft.payload)
        try:
            wire = WireEnvelope.model_validate(envelope)
        except ValidationError as exc:
            raise MalformedPayloadError(
                "Catalog payload is malformed", errors=validation_messages(exc)
            ) from exc

        data = wire.data
        context.counters.resource_records = len(data.resources)
        context.counters.edge_records = len(data.edges)
        log.debug(
            "Restructured catalog %s version %s: %d resources, %d edges",
            data.name,
            data.version,
            len(data.resources),
            len(data.edges),
        )
        return replace(
            draft,
            certname=data.name,
            version=data.version,
            api_version=wire.metadata.api_version,
            raw_resources=tuple(data.resources),
            raw_edges=tuple(data.edges),
            raw_classes=tuple(data.classes),
            raw_tags=tuple(data.tags),
        )


def parse_resource_record(record: Mapping[str, object], *, index: int = 0) -> WireResource:
    """Key-canonicalize and validate a single resource record."""

    try:
        return WireResource.model_validate(canonicalize_keys(record))
    except ValidationError as exc:
        raise MalformedPayloadError(
            "Resource record is malformed",
            errors=validation_messages(exc, prefix=f"resources.{index}"),
        ) from exc


class ResourceRecordsPhase(PipelinePhase):
    """Turn every raw resource mapping into a validated ``WireResource``."""

    name: str = "resource_records"

    def run(self, draft: CatalogDraft, *, context: PipelineContext) -> CatalogDraft:
        _ = context
        raw = draft.require(draft.raw_resources, "raw_resources")
        records = tuple(
            parse_resource_record(record, index=index) for index, record in enumerate(raw)
        )
        return replace(draft, resource_records=records)
