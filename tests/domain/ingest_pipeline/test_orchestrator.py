from __future__ import annotations

from dataclasses import dataclass, replace

import pytest

from catalogist.domain.ingest_pipeline import (
    AliasResolutionPhase,
    CatalogDraft,
    IngestionPipeline,
    PipelineContext,
    PipelinePhase,
    build_default_pipeline,
)


@dataclass(slots=True)
class _RecordingPhase(PipelinePhase):
    name: str
    calls: list[str]

    def run(self, draft: CatalogDraft, *, context: PipelineContext) -> CatalogDraft:
        _ = context
        self.calls.append(self.name)
        return replace(draft, certname=self.name)


def test_pipeline_runs_phases_in_order() -> None:
    calls: list[str] = []
    first = _RecordingPhase(name="first", calls=calls)
    second = _RecordingPhase(name="second", calls=calls)
    pipeline = IngestionPipeline(phases=(first, second))

    result = pipeline.run(CatalogDraft(payload={}), context=PipelineContext())

    assert calls == ["first", "second"]
    assert result.certname == "second"


def test_phases_do_not_mutate_their_input() -> None:
    calls: list[str] = []
    draft = CatalogDraft(payload={})

    IngestionPipeline(phases=(_RecordingPhase(name="only", calls=calls),)).run(draft)

    assert draft.certname is None


def test_with_phase_and_extend_return_new_pipelines() -> None:
    calls: list[str] = []
    base = IngestionPipeline()
    extended = base.with_phase(_RecordingPhase(name="a", calls=calls)).extend(
        [_RecordingPhase(name="b", calls=calls)]
    )

    assert base.phases == ()
    assert [phase.name for phase in extended.phases] == ["a", "b"]


def test_default_pipeline_order() -> None:
    names = [phase.name for phase in build_default_pipeline().phases]

    assert names == [
        "restructure",
        "resource_records",
        "edge_normalization",
        "resource_indexing",
        "alias_resolution",
        "set_canonicalization",
        "integrity",
    ]


def test_phase_run_out_of_order_is_a_programming_error() -> None:
    with pytest.raises(RuntimeError, match="out of order"):
        AliasResolutionPhase().run(CatalogDraft(payload={}), context=PipelineContext())
