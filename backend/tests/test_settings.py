"""Tests for environment-driven app settings."""

from __future__ import annotations

import logging

import pytest

from branchfill.settings import DEFAULT_CORS_ORIGINS, DEFAULT_MAX_CELLS, load_app_settings

ENV_VARS = ("BRANCHFILL_LOG_LEVEL", "BRANCHFILL_CORS_ORIGINS", "BRANCHFILL_MAX_CELLS")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = load_app_settings()
    assert settings.log_level == "INFO"
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.max_cells == DEFAULT_MAX_CELLS


def test_values_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BRANCHFILL_LOG_LEVEL", "debug")
    monkeypatch.setenv("BRANCHFILL_CORS_ORIGINS", "http://a.test, http://b.test ,")
    monkeypatch.setenv("BRANCHFILL_MAX_CELLS", "5000")
    settings = load_app_settings()
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ("http://a.test", "http://b.test")
    assert settings.max_cells == 5000


def test_invalid_log_level_falls_back(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setenv("BRANCHFILL_LOG_LEVEL", "loud")
    with caplog.at_level(logging.WARNING, logger="branchfill.settings"):
        settings = load_app_settings()
    assert settings.log_level == "INFO"
    assert "BRANCHFILL_LOG_LEVEL" in caplog.text


@pytest.mark.parametrize("raw", ["lots", "0", "-3"])
def test_invalid_max_cells_falls_back(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("BRANCHFILL_MAX_CELLS", raw)
    assert load_app_settings().max_cells == DEFAULT_MAX_CELLS
