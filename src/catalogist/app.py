"""Application entry points: load wire catalogs from text or files."""

from __future__ import annotations

import json
from dataclasses import dataclass
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from catalogist.config import get_loader_config, get_pipeline_settings
from catalogist.domain.errors import MalformedPayloadError, PayloadTooLargeError
from catalogist.domain.ingest_pipeline import parse_catalog

if TYPE_CHECKING:
    from catalogist.config import LoaderConfig, PipelineSettings
    from catalogist.domain.model import Catalog

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogSummary:
    certname: str
    version: str
    api_version: str
    resources: int
    edges: int
    aliases: int
    classes: int
    tags: int

    def __str__(self) -> str:
        return (
            f"{self.certname} (version {self.version}, api {self.api_version}): "
            f"{self.resources} resources, {self.edges} edges, {self.aliases} aliases"
        )


def summarize_catalog(catalog: Catalog) -> CatalogSummary:
    return CatalogSummary(
        certname=catalog.certname,
        version=catalog.version,
        api_version=catalog.api_version,
        resources=len(catalog.resources),
        edges=len(catalog.edges),
        aliases=len(catalog.aliases),
        classes=len(catalog.classes),
        tags=len(catalog.tags),
    )


def parse_catalog_json(
    text: str | bytes,
    *,
    settings: PipelineSettings | None = None,
) -> Catalog:
    """Parse a wire-format JSON catalog string into a canonical catalog."""

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedPayloadError(
            "Catalog payload is not valid JSON",
            errors=(f"line {exc.lineno} column {exc.colno}: {exc.msg}",),
        ) from exc
    except UnicodeDecodeError as exc:
        raise MalformedPayloadError(
            "Catalog payload is not valid UTF-8", errors=(str(exc),)
        ) from exc
    return parse_catalog(payload, settings=settings or get_pipeline_settings())


def parse_catalog_file(
    path: str | Path,
    *,
    settings: PipelineSettings | None = None,
    loader: LoaderConfig | None = None,
) -> Catalog:
    """Parse the wire-format JSON catalog stored at ``path``.

    The size limit from ``loader`` (or the environment) is enforced before the
    file is read.
    """

    file_path = Path(path)
    limit = (loader or get_loader_config()).max_payload_bytes
    if limit is not None:
        size = file_path.stat().st_size
        if size > limit:
            raise PayloadTooLargeError(size=size, limit=limit)

    log.debug("Loading catalog from %s", file_path)
    return parse_catalog_json(file_path.read_bytes(), settings=settings)
