from __future__ import annotations

import pytest

from catalogist.domain.errors import DanglingReferenceError
from catalogist.domain.ingest_pipeline import check_edge_integrity
from catalogist.domain.model import (
    Catalog,
    DependencyEdge,
    RelationshipKind,
    Resource,
    ResourceIdentifier,
)


def _id(type_: str, title: str) -> ResourceIdentifier:
    return ResourceIdentifier(type=type_, title=title)


def _catalog(resources: list[Resource], edges: list[DependencyEdge]) -> Catalog:
    return Catalog(
        certname="node.example.com",
        api_version="1",
        version="42",
        resources={resource.identifier: resource for resource in resources},
        edges=frozenset(edges),
    )


def test_valid_catalog_is_returned_unchanged() -> None:
    catalog = _catalog(
        [Resource(type="Class", title="a"), Resource(type="File", title="/b")],
        [DependencyEdge(_id("Class", "a"), _id("File", "/b"), RelationshipKind.CONTAINS)],
    )

    assert check_edge_integrity(catalog) is catalog


def test_missing_target_names_the_edge_and_identifier() -> None:
    edge = DependencyEdge(_id("Class", "a"), _id("File", "/missing"), RelationshipKind.CONTAINS)
    catalog = _catalog([Resource(type="Class", title="a")], [edge])

    with pytest.raises(DanglingReferenceError) as excinfo:
        check_edge_integrity(catalog)

    assert excinfo.value.edge == edge
    assert excinfo.value.missing == _id("File", "/missing")
    assert "File[/missing]" in str(excinfo.value)


def test_missing_source_is_reported_before_missing_target() -> None:
    edge = DependencyEdge(_id("Class", "x"), _id("Class", "y"), RelationshipKind.BEFORE)
    catalog = _catalog([], [edge])

    with pytest.raises(DanglingReferenceError) as excinfo:
        check_edge_integrity(catalog)

    assert excinfo.value.missing == _id("Class", "x")


def test_first_violation_in_sorted_order_is_reported() -> None:
    edges = [
        DependencyEdge(_id("Class", "a"), _id("Class", "zz"), RelationshipKind.CONTAINS),
        DependencyEdge(_id("Class", "a"), _id("Class", "mm"), RelationshipKind.CONTAINS),
    ]
    catalog = _catalog([Resource(type="Class", title="a")], edges)

    for _ in range(3):
        with pytest.raises(DanglingReferenceError) as excinfo:
            check_edge_integrity(catalog)
        assert excinfo.value.missing == _id("Class", "mm")


def test_catalog_without_edges_passes() -> None:
    catalog = _catalog([Resource(type="Class", title="a")], [])

    assert check_edge_integrity(catalog) is catalog
