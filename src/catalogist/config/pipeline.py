"""Catalog pipeline settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from catalogist.domain.model import DuplicatePolicy

from .env import optional_env_var
from .errors import ConfigurationError

DUPLICATE_POLICY_ENV: Final[str] = "CATALOGIST_DUPLICATE_POLICY"


@dataclass(frozen=True, slots=True)
class PipelineSettings:
    """Knobs for one catalog parse; defaults reproduce last-write-wins indexing."""

    duplicate_policy: DuplicatePolicy = DuplicatePolicy.OVERWRITE

    @property
    def strict(self) -> bool:
        return self.duplicate_policy is DuplicatePolicy.REJECT


def get_pipeline_settings() -> PipelineSettings:
    raw = optional_env_var(DUPLICATE_POLICY_ENV)
    if raw is None:
        return PipelineSettings()
    try:
        policy = DuplicatePolicy(raw.lower())
    except ValueError as exc:
        allowed = ", ".join(member.value for member in DuplicatePolicy)
        raise ConfigurationError(
            f"{DUPLICATE_POLICY_ENV} must be one of {allowed}, got {raw!r}"
        ) from exc
    return PipelineSettings(duplicate_policy=policy)
