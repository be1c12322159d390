"""Map wire record keys onto canonical field identifiers."""

from __future__ import annotations

import re
from collections.abc import Mapping
from logging import getLogger

log = getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATORS = re.compile(r"[\s\-.]+")


def canonical_key(key: str) -> str:
    """Return the snake_case field name for a wire key.

    ``apiVersion``, ``APIVersion``, ``api-version`` and ``api_version`` all map
    to ``api_version``.
    """

    snake = _CAMEL_BOUNDARY.sub("_", key.strip())
    return _SEPARATORS.sub("_", snake).lower()


def canonicalize_keys(record: Mapping[str, object]) -> dict[str, object]:
    """Return a copy of ``record`` with canonical keys and untouched values.

    Only the top level is rewritten; nested mappings such as resource
    ``parameters`` keep their keys. Passing anything but a string-keyed mapping
    is a caller bug and raises ``TypeError``.
    """

    if not isinstance(record, Mapping):
        raise TypeError(f"Expected a mapping, got {type(record).__name__}")

    canonical: dict[str, object] = {}
    for key, value in record.items():
        if not isinstance(key, str):
            raise TypeError(f"Expected string keys, got {key!r}")
        name = canonical_key(key)
        if name in canonical:
            log.warning("Wire key %r collapses onto %r; later value wins", key, name)
        canonical[name] = value
    return canonical
