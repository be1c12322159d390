from __future__ import annotations

import logging
from typing import Any

import pytest

from catalogist.config import configure_logging
from catalogist.config import logging as logging_config


@pytest.fixture
def basic_config_calls(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, Any]]:
    calls: list[dict[str, Any]] = []
    monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kw: calls.append(kw))
    return calls


def test_default_level_is_info(basic_config_calls: list[dict[str, Any]]) -> None:
    assert configure_logging() == logging.INFO

    (call,) = basic_config_calls
    assert call["level"] == logging.INFO
    assert call["format"] == logging_config.LOG_FORMAT
    assert call["force"] is False


def test_verbose_switches_to_debug(basic_config_calls: list[dict[str, Any]]) -> None:
    assert configure_logging(verbose=True, force=True) == logging.DEBUG

    (call,) = basic_config_calls
    assert call["level"] == logging.DEBUG
    assert call["force"] is True
