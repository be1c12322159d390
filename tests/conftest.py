from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from catalogist.config import DUPLICATE_POLICY_ENV, MAX_PAYLOAD_BYTES_ENV

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def _clean_catalogist_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(DUPLICATE_POLICY_ENV, raising=False)
    monkeypatch.delenv(MAX_PAYLOAD_BYTES_ENV, raising=False)


@pytest.fixture(scope="session")
def basic_catalog_path() -> Path:
    return DATA_DIR / "catalog_basic.json"


@pytest.fixture
def basic_catalog_payload(basic_catalog_path: Path) -> dict[str, Any]:
    with basic_catalog_path.open() as handle:
        return json.load(handle)
