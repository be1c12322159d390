from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from catalogist.ui.cli import main
from tests.helpers.wire_catalogs import make_edge, make_payload, make_resource

if TYPE_CHECKING:
    from pathlib import Path


def _write_catalog(tmp_path: Path, payload: dict[str, object]) -> Path:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_check_prints_summary(
    basic_catalog_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    main(["check", str(basic_catalog_path)])

    out = capsys.readouterr().out
    assert out.strip() == (
        "web01.example.com (version 1330463884, api 1): 6 resources, 8 edges, 4 aliases"
    )


def test_show_lists_resources_edges_and_aliases(
    basic_catalog_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    main(["show", str(basic_catalog_path)])

    out = capsys.readouterr().out
    assert "Resources:" in out
    assert "  Package[nginx]" in out
    assert "Edges:" in out
    assert "  Class[Webserver] -[contains]-> Service[nginx]" in out
    assert "  Class[httpd]" not in out
    assert "Aliases:" in out
    assert "  Class[web] -> Class[Webserver]" in out


def test_dangling_edge_exits_with_failure(tmp_path: Path) -> None:
    path = _write_catalog(
        tmp_path,
        make_payload(
            resources=[make_resource("Class", "main")],
            edges=[make_edge("Class[main]", "File[/missing]")],
        ),
    )

    with pytest.raises(SystemExit) as excinfo:
        main(["check", str(path)])

    assert excinfo.value.code == 1


def test_missing_file_exits_with_failure(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["check", str(tmp_path / "absent.json")])

    assert excinfo.value.code == 1


def test_strict_rejects_duplicate_resources(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = _write_catalog(
        tmp_path,
        make_payload(resources=[make_resource("Class", "a"), make_resource("Class", "a")]),
    )

    main(["check", str(path)])
    assert "1 resources" in capsys.readouterr().out

    with pytest.raises(SystemExit) as excinfo:
        main(["check", "--strict", str(path)])
    assert excinfo.value.code == 1


def test_non_positive_max_bytes_is_a_usage_error(basic_catalog_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["check", "--max-bytes", "0", str(basic_catalog_path)])

    assert excinfo.value.code == 2


def test_max_bytes_limit_exits_with_failure(basic_catalog_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["check", "--max-bytes", "32", str(basic_catalog_path)])

    assert excinfo.value.code == 1
