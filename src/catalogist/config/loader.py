"""Wire loader configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import optional_positive_int

MAX_PAYLOAD_BYTES_ENV: Final[str] = "CATALOGIST_MAX_PAYLOAD_BYTES"


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    max_payload_bytes: int | None = None


def get_loader_config() -> LoaderConfig:
    return LoaderConfig(max_payload_bytes=optional_positive_int(MAX_PAYLOAD_BYTES_ENV))
