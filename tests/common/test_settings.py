from __future__ import annotations

import logging

import pytest

from common import settings
from common.env import env_bool, env_float, env_int, env_str
from common.logging import setup_default_logging


def test_env_helpers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("X_INT", "7")
    monkeypatch.setenv("X_BAD", "abc")
    monkeypatch.setenv("X_FLOAT", "nan")
    monkeypatch.setenv("X_BOOL", "yes")
    monkeypatch.setenv("X_BLANK", "   ")
    assert env_int("X_INT", 1) == 7
    assert env_int("X_INT", 1, min_value=10) == 10
    assert env_int("X_BAD", 1) == 1
    assert env_int("X_MISSING") is None
    assert env_float("X_FLOAT", 0.5) == 0.5
    assert env_float("X_BAD", 0.5) == 0.5
    assert env_bool("X_BOOL") is True
    assert env_bool("X_BAD", default=True) is True
    assert env_str("X_BLANK", "dflt") == "dflt"


def test_defaults() -> None:
    cfg = settings.get()
    assert cfg.ARC_SEGMENTS == 64
    assert cfg.ELLIPSE_SEGMENTS == 64
    assert cfg.DEFAULT_DURATION == 0.35
    assert cfg.DEFAULT_EASING == "ease_in_out"
    assert cfg.RING_LINE_WIDTH == 2.0


def test_reload_from_env_clamps(env_settings: pytest.MonkeyPatch) -> None:
    env_settings.setenv("DRW_ARC_SEGMENTS", "2")
    env_settings.setenv("DRW_DEFAULT_DURATION", "-3")
    env_settings.setenv("DRW_RING_LINE_WIDTH", "4.5")
    env_settings.setenv("DRW_LOG_LEVEL", "debug")
    settings.reload_from_env()
    cfg = settings.get()
    assert cfg.ARC_SEGMENTS == 4
    assert cfg.DEFAULT_DURATION == 0.0
    assert cfg.RING_LINE_WIDTH == 4.5
    assert cfg.LOG_LEVEL == "debug"


def test_setup_default_logging_respects_existing_handlers() -> None:
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        before = list(root.handlers)
        level = root.level
        setup_default_logging("DEBUG")
        assert root.handlers == before
        assert root.level == level
    finally:
        root.removeHandler(handler)
