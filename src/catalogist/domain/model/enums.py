"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class RelationshipKind(StrEnum):
    """Kinds of dependency edge between two resources.

    Values are the case-sensitive, lower-kebab keywords used on the wire.
    """

    CONTAINS = "contains"
    REQUIRED_BY = "required-by"
    NOTIFIES = "notifies"
    BEFORE = "before"
    SUBSCRIPTION_OF = "subscription-of"


class DuplicatePolicy(StrEnum):
    """How indexing reacts when an identifier is declared more than once."""

    OVERWRITE = "overwrite"
    REJECT = "reject"
