"""Resource identifiers: the ``Type[Title]`` value pair naming a resource."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class ResourceIdentifier:
    """Value-equal pair of resource type and title, usable as a mapping key."""

    type: str
    title: str

    def __post_init__(self) -> None:
        if not self.type:
            raise ValueError("resource type must not be empty")
        if not self.title:
            raise ValueError("resource title must not be empty")

    def __str__(self) -> str:
        return f"{self.type}[{self.title}]"

    def with_title(self, title: str) -> ResourceIdentifier:
        """Return an identifier of the same type carrying ``title``."""

        return ResourceIdentifier(type=self.type, title=title)
