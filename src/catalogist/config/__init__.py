"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, optional_positive_int
from .errors import ConfigurationError
from .loader import MAX_PAYLOAD_BYTES_ENV, LoaderConfig, get_loader_config
from .logging import configure_logging
from .pipeline import DUPLICATE_POLICY_ENV, PipelineSettings, get_pipeline_settings

__all__ = [
    "DUPLICATE_POLICY_ENV",
    "MAX_PAYLOAD_BYTES_ENV",
    "ConfigurationError",
    "LoaderConfig",
    "PipelineSettings",
    "configure_logging",
    "get_loader_config",
    "get_pipeline_settings",
    "optional_env_var",
    "optional_positive_int",
]
