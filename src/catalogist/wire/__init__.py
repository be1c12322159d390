"""Public interface for the wire-format catalog schema."""

from __future__ import annotations

from .schema import WireCatalogData, WireEdge, WireEnvelope, WireMetadata, WireResource

__all__ = [
    "WireCatalogData",
    "WireEdge",
    "WireEnvelope",
    "WireMetadata",
    "WireResource",
]
