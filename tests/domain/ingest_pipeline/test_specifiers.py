from __future__ import annotations

import pytest

from catalogist.domain.errors import MalformedSpecError
from catalogist.domain.ingest_pipeline import format_resource_spec, parse_resource_spec
from catalogist.domain.model import ResourceIdentifier


def test_parses_type_and_title() -> None:
    assert parse_resource_spec("Class[foo]") == ResourceIdentifier(type="Class", title="foo")


def test_title_runs_to_final_bracket() -> None:
    identifier = parse_resource_spec("Exec[echo [a] b]")

    assert identifier.type == "Exec"
    assert identifier.title == "echo [a] b"


def test_title_keeps_paths_and_spaces() -> None:
    identifier = parse_resource_spec("File[/etc/nginx/sites enabled/default]")

    assert identifier == ResourceIdentifier(type="File", title="/etc/nginx/sites enabled/default")


@pytest.mark.parametrize(
    "spec",
    [
        "Class[foo]",
        "File[/etc/hosts]",
        "Nagios::Host[web01.example.com]",
        "Exec[echo [a]]",
        "User[with\nnewline]",
    ],
)
def test_format_inverts_parse(spec: str) -> None:
    assert format_resource_spec(parse_resource_spec(spec)) == spec


@pytest.mark.parametrize(
    "spec",
    ["Classfoo", "Class[foo", "Class[foo]bar", "[foo]", "Class[]", ""],
)
def test_rejects_malformed_specifiers(spec: str) -> None:
    with pytest.raises(MalformedSpecError) as excinfo:
        parse_resource_spec(spec)

    assert excinfo.value.spec == spec
