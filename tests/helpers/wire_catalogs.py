"""Builders for wire-format catalog payloads used across tests."""

from __future__ import annotations

from typing import Any


def make_resource(
    type_: str = "Class",
    title: str = "main",
    *,
    tags: list[str] | None = None,
    parameters: dict[str, Any] | None = None,
    **attributes: Any,
) -> dict[str, Any]:
    """Create a wire resource record with string keys, as submitted."""

    record: dict[str, Any] = {
        "type": type_,
        "title": title,
        "tags": list(tags) if tags is not None else [type_.lower()],
        "parameters": dict(parameters or {}),
    }
    record.update(attributes)
    return record


def make_edge(source: str, target: str, relationship: str = "contains") -> dict[str, str]:
    return {"source": source, "target": target, "relationship": relationship}


def make_payload(
    *,
    resources: list[dict[str, Any]] | None = None,
    edges: list[dict[str, str]] | None = None,
    name: str = "node.example.com",
    version: str | int = 1330463884,
    api_version: str | int = 1,
    classes: list[str] | None = None,
    tags: list[str] | None = None,
) -> dict[str, Any]:
    """Create a full wire payload with ``metadata`` and ``data`` sections."""

    return {
        "metadata": {"api_version": api_version},
        "data": {
            "name": name,
            "version": version,
            "resources": resources if resources is not None else [make_resource()],
            "edges": edges if edges is not None else [],
            "classes": classes if classes is not None else [],
            "tags": tags if tags is not None else [],
        },
    }
