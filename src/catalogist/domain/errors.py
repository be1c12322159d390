"""Errors raised while turning a wire payload into a canonical catalog.

Every error aborts parsing of the payload it was raised for; no partial
catalog is ever returned. Each carries the raw input needed for diagnosis.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from catalogist.domain.model import DependencyEdge, ResourceIdentifier


class CatalogError(ValueError):
    """Base class for catalog parsing failures."""


class MalformedSpecError(CatalogError):
    """Raised when a resource specifier does not match ``Type[Title]``."""

    def __init__(self, spec: str) -> None:
        self.spec = spec
        super().__init__(f"Malformed resource specifier: {spec!r}")


class InvalidRelationshipError(CatalogError):
    """Raised when an edge names an unknown relationship keyword."""

    def __init__(self, relationship: str) -> None:
        self.relationship = relationship
        super().__init__(f"Invalid edge relationship: {relationship!r}")


class MalformedPayloadError(CatalogError):
    """Raised when the payload is missing required fields or has the wrong shape."""

    def __init__(self, message: str, *, errors: Iterable[str] = ()) -> None:
        self.errors = tuple(errors)
        detail = "; ".join(self.errors)
        super().__init__(f"{message}: {detail}" if detail else message)


class PayloadTooLargeError(MalformedPayloadError):
    """Raised by loaders when a payload exceeds the configured size limit."""

    def __init__(self, *, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"Catalog payload is {size} bytes, limit is {limit}")


class DanglingReferenceError(CatalogError):
    """Raised when an edge endpoint names a resource absent from the catalog."""

    def __init__(self, *, edge: DependencyEdge, missing: ResourceIdentifier) -> None:
        self.edge = edge
        self.missing = missing
        super().__init__(
            f"Edge '{edge}' refers to resource '{missing}', "
            "which doesn't exist in the catalog."
        )


class DuplicateIdentifierError(CatalogError):
    """Raised under the ``reject`` policy when an identifier is declared twice."""


class DuplicateResourceError(DuplicateIdentifierError):
    def __init__(self, identifier: ResourceIdentifier) -> None:
        self.identifier = identifier
        super().__init__(f"Resource '{identifier}' is declared more than once")


class DuplicateAliasError(DuplicateIdentifierError):
    def __init__(
        self,
        *,
        alias: ResourceIdentifier,
        previous: ResourceIdentifier,
        current: ResourceIdentifier,
    ) -> None:
        self.alias = alias
        self.previous = previous
        self.current = current
        super().__init__(
            f"Alias '{alias}' is declared by both '{previous}' and '{current}'"
        )


__all__ = [
    "CatalogError",
    "DanglingReferenceError",
    "DuplicateAliasError",
    "DuplicateIdentifierError",
    "DuplicateResourceError",
    "InvalidRelationshipError",
    "MalformedPayloadError",
    "MalformedSpecError",
    "PayloadTooLargeError",
]
