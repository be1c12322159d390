"""Parse and render ``Type[Title]`` resource specifiers."""

from __future__ import annotations

import re

from catalogist.domain.errors import MalformedSpecError
from catalogist.domain.model import ResourceIdentifier

# The title runs to the final ``]``, so titles may contain brackets themselves.
_SPEC_PATTERN = re.compile(r"(?P<type>.*?)\[(?P<title>.*)\]", re.DOTALL)


def parse_resource_spec(spec: str) -> ResourceIdentifier:
    """Convert a textual specifier like ``"Class[foo]"`` into an identifier.

    Raises ``MalformedSpecError`` when there is no bracketed title suffix or
    when either the type or the title is empty.
    """

    match = _SPEC_PATTERN.fullmatch(spec)
    if match is None:
        raise MalformedSpecError(spec)
    type_, title = match.group("type"), match.group("title")
    if not type_ or not title:
        raise MalformedSpecError(spec)
    return ResourceIdentifier(type=type_, title=title)


def format_resource_spec(identifier: ResourceIdentifier) -> str:
    return str(identifier)
